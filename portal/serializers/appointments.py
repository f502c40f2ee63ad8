from django.utils import timezone
from rest_framework import serializers

from portal.backend import NotFoundError
from portal.catalog import DEFAULT_LOCATION
from portal.services.doctors import get_doctor


def _messages(text: str, *extra: str) -> dict:
    return {key: text for key in ('required', 'blank', 'null', 'invalid', 'min_length', *extra)}


class BookingSerializer(serializers.Serializer):
    """Appointment booking form.

    Every field is checked before anything is written; the date is kept as
    a calendar date and echoed back as ``YYYY-MM-DD``.
    """
    doctor_id = serializers.CharField(error_messages=_messages('Please select a doctor'))
    patient_name = serializers.CharField(min_length=2, max_length=255,
                                         error_messages=_messages('Name must be at least 2 characters'))
    patient_email = serializers.EmailField(error_messages=_messages('Please enter a valid email'))
    appointment_date = serializers.DateField(input_formats=['%Y-%m-%d', 'iso-8601'],
                                             error_messages=_messages('Please select a date', 'datetime'))
    appointment_time = serializers.CharField(max_length=64, error_messages=_messages('Please select a time'))
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    location = serializers.CharField(required=False, default=DEFAULT_LOCATION, min_length=2, max_length=255,
                                     error_messages=_messages('Please enter a location'))

    def validate_doctor_id(self, v):
        try:
            return get_doctor(v.strip()).id
        except NotFoundError:
            raise serializers.ValidationError('Please select a doctor')

    def validate_patient_email(self, v):
        return v.strip()

    def validate_appointment_date(self, v):
        if v < timezone.localdate():
            raise serializers.ValidationError('Appointment date cannot be in the past')
        return v

    def validate_reason(self, v):
        return (v or '').strip() or None


class AppointmentIdSerializer(serializers.Serializer):
    id = serializers.CharField(error_messages=_messages('Appointment id is required'))
