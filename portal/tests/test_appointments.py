import datetime as dt

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from portal.models import Appointment

pytestmark = pytest.mark.django_db


def booking(doctor, **overrides):
    data = {
        'doctor_id': str(doctor.id),
        'patient_name': 'Pat Smith',
        'patient_email': 'patient@example.com',
        'appointment_date': (timezone.localdate() + dt.timedelta(days=2)).isoformat(),
        'appointment_time': '09:00 AM - 09:30 AM',
        'reason': 'Check-up',
    }
    data.update(overrides)
    return data


def test_booking_creates_upcoming_appointment(api_client, make_doctor):
    doctor = make_doctor()
    r = api_client.post(reverse('book_appointment'), booking(doctor), format='json')
    assert r.status_code == 201
    assert r.data['ok'] is True
    assert r.data['toast']['title'] == 'Appointment Booked'
    assert r.data['data']['status'] == 'upcoming'
    assert r.data['data']['location'] == 'Main Hospital'
    assert r.data['data']['doctorName'] == 'Dr. Sarah Johnson'

    row = Appointment.objects.get()
    assert row.appointment_date.isoformat() == booking(doctor)['appointment_date']


def test_booking_rejects_email_without_at_sign_before_writing(api_client, make_doctor):
    doctor = make_doctor()
    r = api_client.post(reverse('book_appointment'), booking(doctor, patient_email='patient.example.com'), format='json')
    assert r.status_code == 400
    assert r.data['error']['code'] == 'validation_error'
    assert r.data['error']['fields']['patient_email'] == 'Please enter a valid email'
    assert Appointment.objects.count() == 0


def test_booking_rejects_past_date(api_client, make_doctor):
    doctor = make_doctor()
    yesterday = (timezone.localdate() - dt.timedelta(days=1)).isoformat()
    r = api_client.post(reverse('book_appointment'), booking(doctor, appointment_date=yesterday), format='json')
    assert r.status_code == 400
    assert r.data['error']['fields']['appointment_date'] == 'Appointment date cannot be in the past'
    assert Appointment.objects.count() == 0


def test_booking_reports_every_failing_field(api_client, make_doctor):
    make_doctor()
    r = api_client.post(reverse('book_appointment'), {
        'doctor_id': '',
        'patient_name': 'P',
        'patient_email': 'nope',
        'appointment_date': '',
        'appointment_time': '',
        'location': 'X',
    }, format='json')
    assert r.status_code == 400
    fields = r.data['error']['fields']
    assert fields == {
        'doctor_id': 'Please select a doctor',
        'patient_name': 'Name must be at least 2 characters',
        'patient_email': 'Please enter a valid email',
        'appointment_date': 'Please select a date',
        'appointment_time': 'Please select a time',
        'location': 'Please enter a location',
    }
    assert r.data['error']['message'] == 'Please select a doctor'


def test_booking_unknown_doctor(api_client):
    r = api_client.post(reverse('book_appointment'), {
        'doctor_id': '00000000-0000-0000-0000-000000000000',
        'patient_name': 'Pat Smith',
        'patient_email': 'patient@example.com',
        'appointment_date': timezone.localdate().isoformat(),
        'appointment_time': '09:00 AM - 09:30 AM',
    }, format='json')
    assert r.status_code == 400
    assert r.data['error']['fields']['doctor_id'] == 'Please select a doctor'


def test_double_booking_is_accepted(api_client, make_doctor):
    doctor = make_doctor()
    for _ in range(2):
        assert api_client.post(reverse('book_appointment'), booking(doctor), format='json').status_code == 201
    assert Appointment.objects.count() == 2


def test_booking_refreshes_cached_appointment_list(patient, make_doctor):
    doctor = make_doctor()
    client = APIClient()
    client.force_authenticate(user=patient)
    first = client.get(reverse('api_appointments'))
    assert first.data['data']['tabs'][0]['label'] == 'Upcoming (0)'

    client.post(reverse('book_appointment'), booking(doctor), format='json')

    second = client.get(reverse('api_appointments'))
    assert second.data['data']['tabs'][0]['label'] == 'Upcoming (1)'


def test_cancel_changes_only_that_status(patient, make_doctor, make_appointment):
    doctor = make_doctor()
    target = make_appointment(doctor, reason='Chest pain')
    other = make_appointment(doctor, days_ahead=5)
    before = Appointment.objects.filter(pk=target.pk).values().get()

    client = APIClient()
    client.force_authenticate(user=patient)
    r = client.post(reverse('cancel_appointment'), {'id': str(target.id)}, format='json')

    assert r.status_code == 200
    assert r.data['toast'] == {
        'title': 'Appointment Cancelled',
        'description': 'Your appointment has been cancelled successfully.',
        'variant': 'default',
    }
    after = Appointment.objects.filter(pk=target.pk).values().get()
    assert after.pop('status') == 'cancelled'
    before.pop('status')
    assert after == before
    other.refresh_from_db()
    assert other.status == 'upcoming'


def test_cancel_twice_is_a_no_op(patient, make_doctor, make_appointment):
    target = make_appointment(make_doctor(), status='cancelled')
    client = APIClient()
    client.force_authenticate(user=patient)
    r = client.post(reverse('cancel_appointment'), {'id': str(target.id)}, format='json')
    assert r.status_code == 200
    assert r.data['data']['status'] == 'cancelled'


def test_cancel_completed_is_rejected(patient, make_doctor, make_appointment):
    target = make_appointment(make_doctor(), status='completed', days_ahead=-3)
    client = APIClient()
    client.force_authenticate(user=patient)
    r = client.post(reverse('cancel_appointment'), {'id': str(target.id)}, format='json')
    assert r.status_code == 400
    assert r.data['error']['code'] == 'backend_error'
    assert r.data['toast']['description'].startswith('Failed to cancel appointment:')
    target.refresh_from_db()
    assert target.status == 'completed'


def test_cannot_cancel_someone_elses_appointment(make_user, make_doctor, make_appointment):
    target = make_appointment(make_doctor(), email='someone@example.com')
    stranger = make_user('stranger@example.com')
    client = APIClient()
    client.force_authenticate(user=stranger)
    r = client.post(reverse('cancel_appointment'), {'id': str(target.id)}, format='json')
    assert r.status_code == 403
    target.refresh_from_db()
    assert target.status == 'upcoming'


def test_admin_may_cancel_any_appointment(admin_user, make_doctor, make_appointment):
    target = make_appointment(make_doctor(), email='someone@example.com')
    client = APIClient()
    client.force_authenticate(user=admin_user)
    r = client.post(reverse('cancel_appointment'), {'id': str(target.id)}, format='json')
    assert r.status_code == 200
    target.refresh_from_db()
    assert target.status == 'cancelled'


def test_cancel_requires_sign_in(api_client, make_doctor, make_appointment):
    target = make_appointment(make_doctor())
    r = api_client.post(reverse('cancel_appointment'), {'id': str(target.id)}, format='json')
    assert r.status_code == 401
    assert r.data['ok'] is False


def test_reschedule_is_recorded_without_changing_the_row(patient, make_doctor, make_appointment):
    from portal.models import AuditEvent

    target = make_appointment(make_doctor())
    client = APIClient()
    client.force_authenticate(user=patient)
    r = client.post(reverse('reschedule_appointment'), {'id': str(target.id)}, format='json')
    assert r.status_code == 200
    assert r.data['toast']['title'] == 'Reschedule Requested'
    assert f'#{target.id}' in r.data['toast']['description']
    target.refresh_from_db()
    assert target.status == 'upcoming'
    assert AuditEvent.objects.filter(action='reschedule_request', object_id=str(target.id)).exists()


def test_unknown_appointment_is_not_found(patient):
    client = APIClient()
    client.force_authenticate(user=patient)
    r = client.post(reverse('cancel_appointment'), {'id': 'not-a-uuid'}, format='json')
    assert r.status_code == 404
    assert r.data['error']['code'] == 'not_found'


def test_appointments_page_for_anonymous_prompts_sign_in(api_client, make_doctor):
    make_doctor()
    r = api_client.get('/appointments')
    assert r.status_code == 200
    data = r.data['data']
    assert 'tabs' not in data
    assert data['signInPrompt']['link'] == '/login'
    assert data['scheduler']['minDate'] == timezone.localdate().isoformat()
    assert len(data['scheduler']['timeSlots']) == 11
    assert data['scheduler']['defaults']['location'] == 'Main Hospital'


def test_appointments_page_tabs_for_patient(patient, make_doctor, make_appointment):
    doctor = make_doctor()
    make_appointment(doctor)
    make_appointment(doctor, days_ahead=4)
    make_appointment(doctor, status='completed', days_ahead=-2)
    make_appointment(doctor, email='other@example.com')

    client = APIClient()
    client.force_authenticate(user=patient)
    r = client.get('/appointments')
    labels = [t['label'] for t in r.data['data']['tabs']]
    assert labels == ['Upcoming (2)', 'Completed (1)', 'Cancelled (0)']
