import datetime as dt

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.utils import timezone
from rest_framework.test import APIClient

PASSWORD = 'Str0ng-Passw0rd!'


@pytest.fixture(autouse=True)
def clear_cache():
    # Throttle counters and query cache entries live in the default cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    from portal.services.roles import set_admin

    def _make(email='patient@example.com', *, admin=False, first_name='Pat', last_name='Smith'):
        email = email.lower()
        user = get_user_model().objects.create_user(
            username=email, email=email, password=PASSWORD, first_name=first_name, last_name=last_name,
        )
        set_admin(user, admin)
        return user

    return _make


@pytest.fixture
def patient(make_user):
    return make_user('patient@example.com')


@pytest.fixture
def admin_user(make_user):
    return make_user('admin@example.com', admin=True, first_name='Ada', last_name='Admin')


@pytest.fixture
def make_doctor(db):
    from portal.models import Doctor

    def _make(name='Dr. Sarah Johnson', specialty='Cardiology', rating=4.9, review_count=124, experience=15):
        return Doctor.objects.create(name=name, specialty=specialty, rating=rating,
                                     review_count=review_count, experience=experience)

    return _make


@pytest.fixture
def make_appointment(db):
    from portal.models import Appointment

    def _make(doctor=None, email='patient@example.com', status='upcoming', days_ahead=3, **extra):
        return Appointment.objects.create(
            doctor=doctor,
            patient_name=extra.pop('patient_name', 'Pat Smith'),
            patient_email=email,
            appointment_date=timezone.localdate() + dt.timedelta(days=days_ahead),
            appointment_time=extra.pop('appointment_time', '10:00 AM - 10:30 AM'),
            status=status,
            **extra,
        )

    return _make


@pytest.fixture
def make_enquiry(db):
    from portal.models import Enquiry

    def _make(name='John Doe', email='john@example.com', message='Do you take walk-in patients?', status='new'):
        return Enquiry.objects.create(name=name, email=email, message=message, status=status)

    return _make
