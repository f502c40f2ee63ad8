"""
Management command to populate the database with demo data.
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from portal.models import Appointment, Doctor, Enquiry, HospitalContact, MedicalRecord
from portal.services.roles import set_admin

User = get_user_model()

UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=300&q=80"

DOCTORS = [
    ("Dr. Sarah Johnson", "Cardiology", 4.9, 124, 15, "1559839734-2b71ea197ec2"),
    ("Dr. Michael Chen", "Neurology", 4.8, 98, 12, "1612349317150-e413f6a5b16d"),
    ("Dr. Jessica Patel", "Pediatrics", 4.9, 156, 10, "1594824476967-48c8b964273f"),
    ("Dr. Robert Thompson", "Orthopedics", 4.7, 87, 20, "1537368910025-700350fe46c7"),
    ("Dr. Emily Wilson", "Dermatology", 4.9, 102, 8, "1527613426441-4da17471b66d"),
    ("Dr. James Rodriguez", "Cardiology", 4.8, 114, 17, "1622253692010-333f2da6031d"),
    ("Dr. Linda Chang", "Neurology", 4.7, 78, 11, "1651008376811-b90baee60c1f"),
    ("Dr. Thomas Baker", "Orthopedics", 4.6, 91, 14, "1622902046580-2b47f47f5471"),
    ("Dr. Maria González", "Pediatrics", 4.9, 132, 13, "1614608682850-e0d6ed316d47"),
]

CONTACTS = [
    ("Main Reception", "+1 (555) 123-4567", "info@healhub.example", "123 Health Avenue, Medical City", None),
    ("Emergency Department", "+1 (555) 911-0000", "emergency@healhub.example", None, "Emergency"),
    ("Appointments Desk", "+1 (555) 123-4568", "appointments@healhub.example", None, "Outpatient"),
]

DEMO_PASSWORD = "HealHub#2024"


class Command(BaseCommand):
    help = 'Populate database with demo doctors, contacts, users, appointments and enquiries'

    def add_arguments(self, parser):
        parser.add_argument('--password', default=DEMO_PASSWORD, help='Password for the demo accounts')

    @transaction.atomic
    def handle(self, *args, **options):
        doctors = self.create_doctors()
        self.create_contacts()
        admin, patient = self.create_users(options['password'])
        self.create_appointments(patient, doctors)
        self.create_medical_records(patient, doctors)
        self.create_enquiries()
        self.stdout.write(self.style.SUCCESS(
            f'Demo data ready: {len(doctors)} doctors; admin={admin.email} patient={patient.email}'
        ))

    def create_doctors(self):
        doctors = []
        for name, specialty, rating, reviews, years, photo in DOCTORS:
            doctor, _ = Doctor.objects.update_or_create(
                name=name,
                defaults={
                    'specialty': specialty, 'rating': rating, 'review_count': reviews,
                    'experience': years, 'image_url': UNSPLASH.format(photo),
                },
            )
            doctors.append(doctor)
        return doctors

    def create_contacts(self):
        for name, phone, email, address, department in CONTACTS:
            HospitalContact.objects.update_or_create(
                name=name, defaults={'phone': phone, 'email': email, 'address': address, 'department': department},
            )

    def create_users(self, password):
        users = []
        for email, first, last, is_admin in (
            ('admin@healhub.example', 'Admin', 'User', True),
            ('patient@healhub.example', 'Pat', 'Smith', False),
        ):
            user, created = User.objects.get_or_create(
                username=email, defaults={'email': email, 'first_name': first, 'last_name': last},
            )
            if created:
                user.set_password(password)
                user.save(update_fields=['password'])
            set_admin(user, is_admin)
            users.append(user)
        return users

    def create_appointments(self, patient, doctors):
        if Appointment.objects.filter(patient_email=patient.email).exists():
            return
        today = timezone.localdate()
        plan = [
            (doctors[0], 3, '10:00 AM - 10:30 AM', 'upcoming'),
            (doctors[1], 10, '02:00 PM - 02:30 PM', 'upcoming'),
            (doctors[2], -14, '09:30 AM - 10:00 AM', 'completed'),
            (doctors[3], -5, '03:00 PM - 03:30 PM', 'cancelled'),
        ]
        for doctor, offset, slot, status in plan:
            Appointment.objects.create(
                doctor=doctor,
                patient_name=patient.get_full_name(),
                patient_email=patient.email,
                appointment_date=today + timedelta(days=offset),
                appointment_time=slot,
                status=status,
                reason='Routine consultation',
            )

    def create_medical_records(self, patient, doctors):
        if MedicalRecord.objects.filter(patient_email=patient.email).exists():
            return
        MedicalRecord.objects.create(
            patient_name=patient.get_full_name(),
            patient_email=patient.email,
            doctor=doctors[2],
            diagnosis='Seasonal allergic rhinitis',
            treatment='Antihistamines and nasal spray',
            prescription='Cetirizine 10mg once daily',
            visit_date=timezone.localdate() - timedelta(days=14),
            notes='Review in three months',
        )

    def create_enquiries(self):
        if Enquiry.objects.exists():
            return
        for name, email, message, status in (
            ('John Doe', 'john@example.com', 'Do you accept walk-in patients on weekends?', 'new'),
            ('Jane Roe', 'jane@example.com', 'I would like to know about pediatric vaccination schedules.', 'in-progress'),
            ('Sam Lee', 'sam@example.com', 'Thank you for the quick response about parking.', 'completed'),
        ):
            Enquiry.objects.create(name=name, email=email, message=message, status=status)
