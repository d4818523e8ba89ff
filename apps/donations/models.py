from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Currency(models.TextChoices):
    USD = 'USD', 'US Dollar'
    INR = 'INR', 'Indian Rupee'


class DonationType(models.TextChoices):
    ONLINE = 'online', 'Online'
    OFFLINE = 'offline', 'Offline'


class PaymentMethod(models.TextChoices):
    CARD = 'card', 'Card'
    UPI = 'upi', 'UPI'
    BANK_TRANSFER = 'bank_transfer', 'Bank Transfer'


class OfflineMethod(models.TextChoices):
    CASH = 'cash', 'Cash'
    CHECK = 'check', 'Check'
    BANK_TRANSFER = 'bank_transfer', 'Bank Transfer'
    OTHER = 'other', 'Other'


class DonationStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'
    FAILED = 'failed', 'Failed'
    REFUNDED = 'refunded', 'Refunded'


class Donation(models.Model):
    """
    A gift to one student.

    Online donations are created pending when the payment intent is
    created and completed by the payment webhook. Offline donations are
    recorded by an admin and completed immediately.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Donor (null for guest donations)
    donor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='donations'
    )
    donor_name = models.CharField(max_length=200, blank=True)
    donor_email = models.EmailField(max_length=255, blank=True)
    is_anonymous = models.BooleanField(default=False)

    # Recipient
    student = models.ForeignKey(
        'students.Student',
        on_delete=models.PROTECT,
        related_name='donations'
    )
    student_name = models.CharField(max_length=200)
    need = models.ForeignKey(
        'students.StudentNeed',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='donations'
    )

    # Money (major units)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    currency = models.CharField(max_length=3, choices=Currency.choices, default=Currency.INR)
    platform_fee = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    net_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))

    # Payment
    type = models.CharField(max_length=10, choices=DonationType.choices, default=DonationType.ONLINE)
    stripe_payment_intent_id = models.CharField(max_length=100, unique=True, null=True, blank=True)
    stripe_charge_id = models.CharField(max_length=100, blank=True)
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices, blank=True)

    # Offline
    offline_method = models.CharField(max_length=20, choices=OfflineMethod.choices, blank=True)
    offline_reference = models.CharField(max_length=200, blank=True)
    recorded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recorded_donations'
    )
    proof_document_url = models.URLField(max_length=500, blank=True)

    status = models.CharField(max_length=20, choices=DonationStatus.choices, default=DonationStatus.PENDING)

    # Receipt
    tax_receipt_sent = models.BooleanField(default=False)
    tax_receipt_url = models.URLField(max_length=500, blank=True)

    message = models.TextField(blank=True, max_length=500)

    created_at = models.DateTimeField(auto_now_add=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'donations'
        indexes = [
            models.Index(fields=['donor', 'status', '-created_at'], name='donations_donor_idx'),
            models.Index(fields=['student', 'status', '-created_at'], name='donations_student_idx'),
            models.Index(fields=['status', 'created_at'], name='donations_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.amount} {self.currency} to {self.student_name} ({self.status})"

    @property
    def public_donor_name(self):
        if self.is_anonymous:
            return 'Anonymous Donor'
        return self.donor_name or 'Anonymous Donor'


class StripeEvent(models.Model):
    """Webhook event already processed. Replays with the same id are ignored."""

    event_id = models.CharField(max_length=120, unique=True)
    type = models.CharField(max_length=120, db_index=True)
    object_id = models.CharField(max_length=120, blank=True, db_index=True)
    livemode = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'stripe_events'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.event_id} ({self.type})"
