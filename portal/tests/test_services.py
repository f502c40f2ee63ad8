import datetime as dt

import pytest
from django.core.management import call_command
from django.test import RequestFactory
from django.utils import timezone
from rest_framework.test import APIClient

from portal import records
from portal.backend import NotFoundError
from portal.models import AuditEvent, Doctor, HospitalContact, MedicalRecord, UserRole
from portal.records import UNKNOWN_DOCTOR, AppointmentStatus, EnquiryStatus
from portal.services import appointments, doctors, enquiries
from portal.services.audit import client_ip

pytestmark = pytest.mark.django_db


def test_count_patients_counts_distinct_emails(make_doctor, make_appointment):
    doctor = make_doctor()
    make_appointment(doctor, email='a@example.com')
    make_appointment(doctor, email='A@example.com', days_ahead=5)
    make_appointment(doctor, email='b@example.com')
    assert appointments.count_patients() == 2
    assert appointments.count_appointments() == 3


def test_removed_doctor_reads_as_unknown(patient, make_doctor, make_appointment):
    doctor = make_doctor()
    make_appointment(doctor)
    doctor.delete()
    [record] = appointments.list_appointments_for_patient('patient@example.com')
    assert record.doctor_id is None
    assert record.doctor_name == UNKNOWN_DOCTOR
    assert record.doctor_specialty == 'General'


def test_get_doctor_missing():
    with pytest.raises(NotFoundError):
        doctors.get_doctor('6f1e3a52-0000-4000-8000-000000000000')


def test_recent_enquiries_limit(make_enquiry):
    for i in range(6):
        make_enquiry(name=f'Person {i}')
    assert len(enquiries.recent_enquiries(5)) == 5
    assert enquiries.count_enquiries() == 6


def _record(email, doctor=None, days_ago=1):
    return MedicalRecord.objects.create(
        patient_name='Pat', patient_email=email, doctor=doctor, diagnosis='Flu', treatment='Rest',
        prescription='Fluids', visit_date=timezone.localdate() - dt.timedelta(days=days_ago),
    )


def test_medical_records_scoped_to_patient(patient, admin_user, make_doctor):
    doctor = make_doctor()
    _record('patient@example.com', doctor, days_ago=10)
    _record('patient@example.com', None, days_ago=2)
    _record('other@example.com', doctor)

    client = APIClient()
    client.force_authenticate(user=patient)
    own = client.get('/api/medical-records').data['data']
    assert len(own) == 2
    assert own[0]['doctorName'] == UNKNOWN_DOCTOR

    client.force_authenticate(user=admin_user)
    assert len(client.get('/api/medical-records').data['data']) == 3


def test_medical_records_page_prompts_anonymous(api_client):
    r = api_client.get('/medical-records')
    assert r.status_code == 200
    assert r.data['data']['signInPrompt']['link'] == '/login'


def test_seed_demo_is_repeatable():
    call_command('seed_demo')
    call_command('seed_demo')
    assert Doctor.objects.count() == 9
    assert UserRole.objects.filter(is_admin=True).count() == 1
    assert appointments.count_patients() == 1


def test_grant_and_revoke_admin(patient):
    call_command('grant_admin', 'Patient@Example.com')
    assert UserRole.objects.get(user=patient).is_admin is True
    call_command('grant_admin', 'patient@example.com', '--revoke')
    assert UserRole.objects.get(user=patient).is_admin is False


def test_warm_query_cache(make_doctor):
    make_doctor()
    call_command('warm_query_cache')
    Doctor.objects.all().delete()
    # still served from the warmed entry
    assert len(doctors.list_doctors()) == 1


def test_doctor_from_row_converts_rating(make_doctor):
    row = make_doctor(rating=4.5)
    row.refresh_from_db()
    record = records.doctor_from_row(row)
    assert record.id == str(row.pk)
    assert isinstance(record.rating, float) and record.rating == 4.5
    assert record.image_url == ''
    assert record.KIND == 'doctor'


def test_appointment_from_row_without_doctor(make_appointment):
    row = make_appointment(None, reason='')
    record = records.appointment_from_row(row)
    assert record.id == str(row.pk)
    assert record.doctor_id is None
    assert record.doctor_name == UNKNOWN_DOCTOR
    assert record.doctor_specialty == records.DEFAULT_SPECIALTY
    assert record.doctor_image == ''
    assert record.reason is None
    assert record.status is AppointmentStatus.UPCOMING


def test_appointment_from_row_with_doctor(make_doctor, make_appointment):
    doctor = make_doctor()
    record = records.appointment_from_row(make_appointment(doctor, status='completed'))
    assert record.doctor_id == str(doctor.pk)
    assert record.doctor_name == 'Dr. Sarah Johnson'
    assert record.status is AppointmentStatus.COMPLETED


def test_enquiry_from_row(make_enquiry):
    row = make_enquiry(status='in-progress')
    record = records.enquiry_from_row(row)
    assert record.id == str(row.pk)
    assert record.phone is None
    assert record.status is EnquiryStatus.IN_PROGRESS
    assert record.status.label == 'In Progress'


def test_contact_from_row():
    row = HospitalContact.objects.create(name='Main Reception', phone='+1 555 0100', email='info@example.com',
                                         address='')
    record = records.contact_from_row(row)
    assert record.id == str(row.pk)
    assert record.address is None
    assert record.department is None


def test_medical_record_from_row(make_doctor):
    doctor = make_doctor()
    with_doctor = records.medical_record_from_row(_record('patient@example.com', doctor))
    assert with_doctor.doctor_id == str(doctor.pk)
    assert with_doctor.doctor_name == 'Dr. Sarah Johnson'
    orphan = records.medical_record_from_row(_record('patient@example.com'))
    assert orphan.doctor_id is None
    assert orphan.doctor_name == UNKNOWN_DOCTOR
    assert orphan.notes is None


def test_client_ip_prefers_forwarded_for():
    factory = RequestFactory()
    proxied = factory.get('/', HTTP_X_FORWARDED_FOR='203.0.113.7, 10.0.0.1', REMOTE_ADDR='10.0.0.1')
    assert client_ip(proxied) == '203.0.113.7'
    direct = factory.get('/', REMOTE_ADDR='198.51.100.4')
    assert client_ip(direct) == '198.51.100.4'


def test_audit_rows_are_tagged_with_record_kind(api_client, make_doctor):
    doctor = make_doctor()
    r = api_client.post('/api/appointments/book', {
        'doctor_id': str(doctor.id),
        'patient_name': 'Pat Smith',
        'patient_email': 'patient@example.com',
        'appointment_date': (timezone.localdate() + dt.timedelta(days=1)).isoformat(),
        'appointment_time': '09:00 AM - 09:30 AM',
    }, format='json', HTTP_X_FORWARDED_FOR='203.0.113.7')
    assert r.status_code == 201
    event = AuditEvent.objects.get(action='book_appointment')
    assert event.object_type == 'appointment'
    assert event.object_id == r.data['data']['id']

    r = api_client.post('/api/enquiries/submit', {
        'name': 'John Doe',
        'email': 'john@example.com',
        'message': 'Do you take walk-in patients?',
    }, format='json', HTTP_X_FORWARDED_FOR='203.0.113.7')
    assert r.status_code == 201
    event = AuditEvent.objects.get(action='submit_enquiry')
    assert event.object_type == 'enquiry'
    assert event.detail['ip'] == '203.0.113.7'
