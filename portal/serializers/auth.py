from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password as run_password_validators
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

User = get_user_model()

ALL_REQUIRED = {'required': 'All fields are required', 'blank': 'All fields are required'}


class SignUpSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={**ALL_REQUIRED, 'invalid': 'Please enter a valid email'})
    password = serializers.CharField(write_only=True, trim_whitespace=False, error_messages=ALL_REQUIRED)
    first_name = serializers.CharField(max_length=150, error_messages=ALL_REQUIRED)
    last_name = serializers.CharField(max_length=150, error_messages=ALL_REQUIRED)

    def validate_email(self, v):
        v = v.strip().lower()
        if User.objects.filter(username=v).exists():
            raise serializers.ValidationError('User already registered')
        return v

    def validate(self, attrs):
        candidate = User(username=attrs['email'], email=attrs['email'],
                         first_name=attrs['first_name'], last_name=attrs['last_name'])
        try:
            run_password_validators(attrs['password'], user=candidate)
        except DjangoValidationError as e:
            raise serializers.ValidationError({'password': list(e.messages)})
        return attrs


class SignInSerializer(serializers.Serializer):
    email = serializers.CharField(error_messages={'required': 'Email is required', 'blank': 'Email is required'})
    password = serializers.CharField(trim_whitespace=False,
                                     error_messages={'required': 'Password is required', 'blank': 'Password is required'})

    def validate_email(self, v):
        return v.strip().lower()


class RefreshSerializer(serializers.Serializer):
    refresh = serializers.CharField()
