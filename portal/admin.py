"""
Django admin registrations for the portal models.

Doctors and hospital contacts are only ever created or edited here;
the public site reads them.  Role flags can also be toggled here or with
the ``grant_admin`` management command.
"""

from django.contrib import admin

from .models import (
    Doctor,
    Appointment,
    Enquiry,
    HospitalContact,
    MedicalRecord,
    UserRole,
    AuditEvent,
)


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('name', 'specialty', 'rating', 'review_count', 'experience')
    list_filter = ('specialty',)
    search_fields = ('name', 'specialty')


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('patient_name', 'patient_email', 'doctor', 'appointment_date', 'appointment_time', 'status')
    list_filter = ('status', 'appointment_date')
    search_fields = ('patient_name', 'patient_email')


@admin.register(Enquiry)
class EnquiryAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('name', 'email', 'message')


@admin.register(HospitalContact)
class HospitalContactAdmin(admin.ModelAdmin):
    list_display = ('name', 'department', 'phone', 'email')


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ('patient_name', 'patient_email', 'doctor', 'visit_date', 'diagnosis')
    search_fields = ('patient_name', 'patient_email', 'diagnosis')


@admin.register(UserRole)
class UserRoleAdmin(admin.ModelAdmin):
    list_display = ('user', 'is_admin', 'created_at')
    list_filter = ('is_admin',)


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('action', 'object_type', 'object_id', 'user', 'created_at')
    list_filter = ('action',)
    readonly_fields = ('user', 'action', 'object_type', 'object_id', 'detail', 'created_at')
