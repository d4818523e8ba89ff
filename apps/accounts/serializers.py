from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import Donor


class DonorSerializer(serializers.ModelSerializer):
    """Donor profile as seen by the donor."""

    students_supported = serializers.SlugRelatedField(
        many=True,
        read_only=True,
        slug_field='slug'
    )

    class Meta:
        model = Donor
        fields = [
            'id',
            'email',
            'display_name',
            'photo_url',
            'phone',
            'address_line1',
            'address_line2',
            'city',
            'state',
            'postal_code',
            'country',
            'is_anonymous',
            'receive_updates',
            'receive_newsletter',
            'total_donated',
            'donation_count',
            'students_supported',
            'auth_provider',
            'role',
            'created_at',
            'last_login',
        ]
        read_only_fields = [
            'id',
            'email',
            'total_donated',
            'donation_count',
            'students_supported',
            'auth_provider',
            'role',
            'created_at',
            'last_login',
        ]


class DonorRegistrationSerializer(serializers.Serializer):
    """Serializer for donor registration."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class DonorLoginSerializer(serializers.Serializer):
    """Serializer for donor login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class GoogleSignInSerializer(serializers.Serializer):
    """ID token obtained from the Google sign-in popup."""

    id_token = serializers.CharField(required=True)


class PasswordResetRequestSerializer(serializers.Serializer):
    """Serializer for password reset request."""

    email = serializers.EmailField(required=True)


class PasswordResetConfirmSerializer(serializers.Serializer):
    """Serializer for password reset confirmation."""

    token = serializers.CharField(required=True)
    new_password = serializers.CharField(
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    new_password_confirm = serializers.CharField(
        required=True,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['new_password'] != attrs['new_password_confirm']:
            raise serializers.ValidationError({
                'new_password_confirm': 'Passwords do not match'
            })
        return attrs


class DonorPublicSerializer(serializers.ModelSerializer):
    """Public donor info (for donor walls and student pages)."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = Donor
        fields = ['id', 'display_name', 'photo_url', 'donation_count', 'created_at']
        read_only_fields = fields

    def get_display_name(self, obj):
        if obj.is_anonymous:
            return 'Anonymous Donor'
        return obj.get_display_name()
