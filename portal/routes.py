"""
URL mappings for the HealHub pages and JSON API.

Page paths mirror the front end's route table; trailing slashes are
deliberately omitted.  Any path not matched here (or by the project
URLs) falls through to the not-found page.
"""
from django.urls import path, re_path

from .views import admin_dashboard, appointments, auth, contact, doctors, enquiries, health, home, medical_records
from .views import services

urlpatterns = [
    path('healthz', health.healthz, name='healthz'),

    # Pages
    path('', home.home, name='home'),
    path('doctors', doctors.doctors_page, name='doctors_page'),
    path('doctor/<str:doctor_id>', doctors.doctor_profile_page, name='doctor_profile_page'),
    path('services', services.services_page, name='services_page'),
    path('services/<str:service_id>', services.service_detail_page, name='service_detail_page'),
    path('appointments', appointments.appointments_page, name='appointments_page'),
    path('contact', contact.contact_page, name='contact_page'),
    path('medical-records', medical_records.medical_records_page, name='medical_records_page'),
    path('login', auth.login_page, name='login_page'),
    path('register', auth.register_page, name='register_page'),
    path('admin', admin_dashboard.admin_dashboard, name='admin_dashboard'),
    path('admin/enquiries', enquiries.enquiries_page, name='admin_enquiries_page'),

    # Auth
    path('api/auth/sign-up', auth.sign_up, name='sign_up'),
    path('api/auth/sign-in', auth.sign_in, name='sign_in'),
    path('api/auth/sign-out', auth.sign_out, name='sign_out'),
    path('api/auth/session', auth.session_view, name='session'),
    path('api/auth/refresh', auth.refresh_view, name='jwt_refresh'),

    # Doctors
    path('api/doctors', doctors.api_doctors, name='api_doctors'),
    path('api/doctors/<str:doctor_id>', doctors.api_doctor_detail, name='api_doctor_detail'),

    # Appointments
    path('api/appointments', appointments.api_appointments, name='api_appointments'),
    path('api/appointments/book', appointments.book_appointment, name='book_appointment'),
    path('api/appointments/cancel', appointments.cancel_appointment, name='cancel_appointment'),
    path('api/appointments/reschedule', appointments.reschedule_appointment, name='reschedule_appointment'),

    # Enquiries
    path('api/enquiries', enquiries.api_enquiries, name='api_enquiries'),
    path('api/enquiries/submit', enquiries.api_submit_enquiry, name='submit_enquiry'),
    path('api/enquiries/status', enquiries.api_update_enquiry_status, name='update_enquiry_status'),

    # Contacts & medical records
    path('api/contacts', contact.api_contacts, name='api_contacts'),
    path('api/medical-records', medical_records.api_medical_records, name='api_medical_records'),

    # Catch-all
    re_path(r'^.*$', home.not_found, name='not_found'),
]
