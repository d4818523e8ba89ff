from django.contrib import admin
from django.utils.html import format_html
from apps.donations.models import Donation, StripeEvent, DonationStatus


STATUS_COLORS = {
    DonationStatus.PENDING: '#D97706',
    DonationStatus.COMPLETED: '#16A34A',
    DonationStatus.FAILED: '#DC2626',
    DonationStatus.REFUNDED: '#6B7280',
}


@admin.register(Donation)
class DonationAdmin(admin.ModelAdmin):
    """Admin interface for donations."""

    list_display = [
        'student_name',
        'donor_name',
        'amount',
        'currency',
        'type',
        'status_badge',
        'created_at',
        'completed_at'
    ]
    list_filter = [
        'status',
        'type',
        'currency',
        'payment_method',
        'offline_method',
        'is_anonymous',
        'created_at'
    ]
    search_fields = [
        'student_name',
        'donor_name',
        'donor_email',
        'stripe_payment_intent_id',
        'offline_reference'
    ]
    readonly_fields = [
        'platform_fee',
        'net_amount',
        'stripe_payment_intent_id',
        'stripe_charge_id',
        'created_at',
        'completed_at'
    ]
    raw_id_fields = ['donor', 'student', 'need', 'recorded_by']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Donation', {
            'fields': (
                'student',
                'student_name',
                'need',
                'amount',
                'currency',
                'platform_fee',
                'net_amount',
                'status',
                'message'
            )
        }),
        ('Donor', {
            'fields': ('donor', 'donor_name', 'donor_email', 'is_anonymous')
        }),
        ('Online Payment', {
            'fields': ('stripe_payment_intent_id', 'stripe_charge_id', 'payment_method'),
            'classes': ('collapse',)
        }),
        ('Offline Payment', {
            'fields': ('offline_method', 'offline_reference', 'recorded_by', 'proof_document_url'),
            'classes': ('collapse',)
        }),
        ('Receipt', {
            'fields': ('tax_receipt_sent', 'tax_receipt_url')
        }),
        ('Metadata', {
            'fields': ('type', 'created_at', 'completed_at'),
            'classes': ('collapse',)
        }),
    )

    def status_badge(self, obj):
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            STATUS_COLORS.get(obj.status, '#6B7280'), obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'


@admin.register(StripeEvent)
class StripeEventAdmin(admin.ModelAdmin):
    list_display = ['event_id', 'type', 'object_id', 'livemode', 'created_at']
    list_filter = ['type', 'livemode']
    search_fields = ['event_id', 'object_id']
    readonly_fields = ['event_id', 'type', 'object_id', 'livemode', 'created_at']
