"""
Doctor directory, profile pages and the doctor search API.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from ..backend import NotFoundError
from ..responses import ok
from ..serializers.doctors import DoctorFilterSerializer
from ..services.doctors import get_doctor, list_doctors, list_specialties
from ..viewmodels import doctor_card, doctor_profile


@api_view(['GET'])
@permission_classes([AllowAny])
def doctors_page(request):
    doctors = list_doctors()
    return ok({
        'page': 'doctors',
        'specialties': ['all', *list_specialties()],
        'doctors': [doctor_card(d) for d in doctors],
        'emptyMessage': 'No doctors found matching your criteria.',
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def doctor_profile_page(request, doctor_id):
    try:
        doctor = get_doctor(doctor_id)
    except NotFoundError as e:
        return ok({
            'page': 'doctor-not-found',
            'title': 'Doctor Not Found',
            'message': e.message,
            'link': {'label': 'Back to Doctors', 'link': '/doctors'},
        }, status=404)
    return ok({'page': 'doctor', 'doctor': doctor_profile(doctor)})


@api_view(['GET'])
@permission_classes([AllowAny])
def api_doctors(request):
    """List doctors.

    Query params:
      - q: name contains (case-insensitive)
      - specialty: exact specialty, case-insensitive; ``all`` for none
    """
    s = DoctorFilterSerializer(data=request.query_params)
    s.is_valid(raise_exception=True)
    doctors = list_doctors(q=s.validated_data.get('q'), specialty=s.validated_data.get('specialty'))
    return ok([doctor_card(d) for d in doctors])


@api_view(['GET'])
@permission_classes([AllowAny])
def api_doctor_detail(request, doctor_id):
    return ok(doctor_profile(get_doctor(doctor_id)))
