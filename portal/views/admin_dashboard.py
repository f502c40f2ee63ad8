"""
Administrative dashboard.

Shows headline counts, the most recent enquiries and three charts
(appointments by status, doctors by specialty, appointments per day).
Everything is recomputed on each request.  Only users with the admin
role flag may open the page; anyone else is sent back to ``/``.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from ..analytics import count_by, daily_series
from ..guard import admin_route
from ..responses import ok
from ..services.appointments import count_appointments, count_patients, list_appointments
from ..services.doctors import count_doctors, list_doctors
from ..services.enquiries import count_enquiries, recent_enquiries
from ..viewmodels import enquiry_row

ADMIN_NAV = [
    {'label': 'Dashboard', 'link': '/admin'},
    {'label': 'Medical Records', 'link': '/medical-records'},
    {'label': 'Enquiries', 'link': '/admin/enquiries'},
]


def dashboard_charts() -> dict:
    appointments = list_appointments()
    return {
        'appointmentsByStatus': count_by(appointments, 'status'),
        'doctorsBySpecialty': count_by(list_doctors(), 'specialty'),
        'appointmentsByDate': daily_series(appointments, 'appointment_date', last=7),
    }


@api_view(['GET'])
@permission_classes([AllowAny])
@admin_route
def admin_dashboard(request):
    return ok({
        'page': 'admin',
        'title': 'Dashboard',
        'nav': ADMIN_NAV,
        'stats': [
            {'label': 'Total Doctors', 'value': count_doctors(), 'link': '/doctors'},
            {'label': 'Appointments', 'value': count_appointments(), 'link': '/appointments'},
            {'label': 'Enquiries', 'value': count_enquiries(), 'link': '/admin/enquiries'},
            {'label': 'Patients', 'value': count_patients(), 'link': '/medical-records'},
        ],
        'recentEnquiries': [enquiry_row(e) for e in recent_enquiries(5)],
        'charts': dashboard_charts(),
    })
