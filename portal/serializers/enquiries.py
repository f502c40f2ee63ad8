import bleach
from rest_framework import serializers

from portal.records import EnquiryStatus


def _clean(v: str) -> str:
    return bleach.clean(v or '', tags=[], attributes={}, strip=True).strip()


class EnquirySubmitSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=255, error_messages={
        'required': 'Name must be at least 2 characters',
        'blank': 'Name must be at least 2 characters',
        'min_length': 'Name must be at least 2 characters',
    })
    email = serializers.EmailField(error_messages={
        'required': 'Please enter a valid email',
        'blank': 'Please enter a valid email',
        'invalid': 'Please enter a valid email',
    })
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)
    message = serializers.CharField(min_length=10, max_length=5000, error_messages={
        'required': 'Message must be at least 10 characters',
        'blank': 'Message must be at least 10 characters',
        'min_length': 'Message must be at least 10 characters',
    })

    def validate_name(self, v):
        v = _clean(v)
        if len(v) < 2:
            raise serializers.ValidationError('Name must be at least 2 characters')
        return v

    def validate_phone(self, v):
        return _clean(v) or None

    def validate_message(self, v):
        v = _clean(v)
        if len(v) < 10:
            raise serializers.ValidationError('Message must be at least 10 characters')
        return v


class EnquiryStatusSerializer(serializers.Serializer):
    id = serializers.CharField(error_messages={'required': 'Enquiry id is required', 'blank': 'Enquiry id is required'})
    status = serializers.ChoiceField(
        choices=[(s.value, s.label) for s in EnquiryStatus],
        error_messages={'invalid_choice': 'Please select a valid status', 'required': 'Please select a valid status'},
    )
