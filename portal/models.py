"""
Database models for the HealHub portal.

The tables mirror the rows the public site and the admin dashboard work
with: doctors, appointments, enquiries, hospital contacts and medical
records.  Every entity uses a UUID primary key.  Identity is Django's
built-in ``auth.User``; the admin flag lives in :class:`UserRole` so
that it can be toggled without touching the user row.
"""
from __future__ import annotations

import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Doctor(models.Model):
    """A practitioner shown on the doctors directory and service pages."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    # Free text; service pages match it case-insensitively against department titles
    specialty = models.CharField(max_length=128, db_index=True)
    rating = models.DecimalField(
        max_digits=3,
        decimal_places=1,
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    review_count = models.PositiveIntegerField(default=0)
    experience = models.PositiveIntegerField(default=0, help_text="Years of practice")
    image_url = models.URLField(max_length=500, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']

    def __str__(self) -> str:
        return f"{self.name} ({self.specialty})"


class Appointment(models.Model):
    STATUS_CHOICES = [
        ('upcoming', 'Upcoming'),
        ('completed', 'Completed'),
        ('cancelled', 'Cancelled'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    doctor = models.ForeignKey(
        Doctor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='appointments',
    )
    patient_name = models.CharField(max_length=255)
    patient_email = models.EmailField(db_index=True)
    appointment_date = models.DateField()
    # Slot label such as "09:00 AM - 09:30 AM"
    appointment_time = models.CharField(max_length=64)
    location = models.CharField(max_length=255, default='Main Hospital')
    reason = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='upcoming', db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['appointment_date', 'created_at']
        indexes = [
            models.Index(fields=['patient_email', 'appointment_date'], name='portal_appt_email_date_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.patient_name} {self.appointment_date} {self.appointment_time}"


class Enquiry(models.Model):
    """A message submitted through the public contact form."""
    STATUS_CHOICES = [
        ('new', 'New'),
        ('in-progress', 'In Progress'),
        ('completed', 'Completed'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=32, blank=True, null=True)
    message = models.TextField()
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='new', db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'enquiries'

    def __str__(self) -> str:
        return f"{self.name} <{self.email}> [{self.status}]"


class HospitalContact(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=32)
    email = models.EmailField()
    address = models.CharField(max_length=500, blank=True, null=True)
    department = models.CharField(max_length=128, blank=True, null=True)

    class Meta:
        ordering = ['name']

    def __str__(self) -> str:
        return self.name


class MedicalRecord(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_name = models.CharField(max_length=255)
    patient_email = models.EmailField(db_index=True)
    doctor = models.ForeignKey(
        Doctor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='medical_records',
    )
    diagnosis = models.TextField()
    treatment = models.TextField()
    prescription = models.TextField()
    visit_date = models.DateField()
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-visit_date']

    def __str__(self) -> str:
        return f"{self.patient_name} {self.visit_date}"


class UserRole(models.Model):
    """Role flags for a signed-in user.

    ``is_admin`` is the only thing consulted when deciding whether a user
    may open the admin dashboard; Django's ``is_superuser`` is not.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='portal_role')
    is_admin = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.user} admin={self.is_admin}"


class AuditEvent(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.CharField(max_length=64, blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at'], name='portal_audit_action_idx'),
            models.Index(fields=['object_type', 'object_id', 'created_at'], name='portal_audit_object_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.action} {self.object_type}:{self.object_id}"
