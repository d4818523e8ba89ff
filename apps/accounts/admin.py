from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import Donor, DonorRole


ROLE_COLORS = {
    DonorRole.DONOR: ('#E0E7FF', '#3730A3'),
    DonorRole.ADMIN: ('#FDE68A', '#92400E'),
    DonorRole.SUPER_ADMIN: ('#FCA5A5', '#7F1D1D'),
}


@admin.register(Donor)
class DonorAdmin(BaseUserAdmin):
    """
    Admin interface for donor accounts.

    Staff use it to look up donors, promote reviewers to the admin role
    and deactivate abusive accounts.
    """

    list_display = [
        'email',
        'display_name',
        'role_badge',
        'auth_provider',
        'total_donated',
        'donation_count',
        'is_active_badge',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'auth_provider',
        'is_active',
        'is_staff',
        'receive_newsletter',
        'created_at',
    ]

    search_fields = [
        'email',
        'display_name',
        'phone',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'display_name', 'password', 'photo_url', 'phone')
        }),
        ('Address', {
            'fields': (
                'address_line1', 'address_line2', 'city',
                'state', 'postal_code', 'country',
            ),
            'classes': ('collapse',),
        }),
        ('Preferences', {
            'fields': ('is_anonymous', 'receive_updates', 'receive_newsletter'),
        }),
        ('Giving', {
            'fields': ('total_donated', 'donation_count', 'students_supported', 'stripe_customer_id'),
        }),
        ('Permissions', {
            'fields': ('role', 'is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('auth_provider', 'created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create Donor', {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
        ('Permissions', {
            'fields': ('role', 'is_active', 'is_staff', 'is_superuser'),
        }),
    )

    readonly_fields = [
        'total_donated',
        'donation_count',
        'auth_provider',
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions', 'students_supported']

    def role_badge(self, obj):
        """Display role as colored badge."""
        background, color = ROLE_COLORS.get(obj.role, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            background, color, obj.get_role_display()
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        if obj.is_active:
            return format_html(
                '<span style="background: #16A34A; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Active</span>'
            )
        return format_html(
            '<span style="background: #DC2626; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Inactive</span>'
        )
    is_active_badge.short_description = 'Status'
    is_active_badge.admin_order_field = 'is_active'

    actions = [
        'activate_donors',
        'deactivate_donors',
        'promote_to_admin',
    ]

    @admin.action(description='Activate selected donors')
    def activate_donors(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} donor(s).')

    @admin.action(description='Deactivate selected donors')
    def deactivate_donors(self, request, queryset):
        """Deactivate selected donors (excludes superusers)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} donor(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)

    @admin.action(description='Grant case reviewer (admin) role')
    def promote_to_admin(self, request, queryset):
        count = queryset.filter(role=DonorRole.DONOR).update(role=DonorRole.ADMIN)
        self.message_user(request, f'Promoted {count} donor(s) to admin.')
