from rest_framework import serializers


class DoctorFilterSerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, max_length=100)
    specialty = serializers.CharField(required=False, allow_blank=True, max_length=128)
