from decimal import Decimal
from rest_framework import serializers
from .models import Donation, Currency, OfflineMethod


class DonationSerializer(serializers.ModelSerializer):
    """A donor's own donation history entry."""

    student_slug = serializers.SlugField(source='student.slug', read_only=True)

    class Meta:
        model = Donation
        fields = [
            'id',
            'student',
            'student_name',
            'student_slug',
            'need',
            'amount',
            'currency',
            'platform_fee',
            'net_amount',
            'type',
            'payment_method',
            'offline_method',
            'status',
            'is_anonymous',
            'message',
            'tax_receipt_sent',
            'tax_receipt_url',
            'created_at',
            'completed_at',
        ]
        read_only_fields = fields


class DonationPublicSerializer(serializers.ModelSerializer):
    """Donation as shown on a student's page. Never exposes anonymous donors."""

    donor_name = serializers.CharField(source='public_donor_name', read_only=True)

    class Meta:
        model = Donation
        fields = [
            'id',
            'donor_name',
            'amount',
            'currency',
            'message',
            'created_at',
        ]
        read_only_fields = fields


class PaymentIntentRequestSerializer(serializers.Serializer):
    """Amount is in major units (e.g. 2500 means INR 2,500)."""

    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    currency = serializers.ChoiceField(choices=Currency.choices)
    student_id = serializers.UUIDField()
    need_id = serializers.UUIDField(required=False, allow_null=True)
    donor_email = serializers.EmailField(required=False, allow_blank=True)
    donor_name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    is_anonymous = serializers.BooleanField(default=False)
    message = serializers.CharField(required=False, allow_blank=True, max_length=500)

    def to_internal_value(self, data):
        if hasattr(data, 'get') and isinstance(data.get('currency'), str):
            data = data.copy()
            data['currency'] = data['currency'].upper()
        return super().to_internal_value(data)


class PaymentIntentResponseSerializer(serializers.Serializer):
    client_secret = serializers.CharField()
    payment_intent_id = serializers.CharField()
    donation_id = serializers.UUIDField()


class OfflineDonationSerializer(serializers.Serializer):
    student_id = serializers.UUIDField()
    need_id = serializers.UUIDField(required=False, allow_null=True)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    currency = serializers.ChoiceField(choices=Currency.choices)
    offline_method = serializers.ChoiceField(choices=OfflineMethod.choices)
    offline_reference = serializers.CharField(required=False, allow_blank=True, max_length=200)
    proof_document_url = serializers.URLField(required=False, allow_blank=True)
    donor_name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    donor_email = serializers.EmailField(required=False, allow_blank=True)
    is_anonymous = serializers.BooleanField(default=False)
    message = serializers.CharField(required=False, allow_blank=True, max_length=500)
