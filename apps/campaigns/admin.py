from django.contrib import admin
from apps.campaigns.models import Campaign


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    """Admin interface for campaigns."""

    list_display = [
        'title',
        'type',
        'goal_amount',
        'raised_amount',
        'donor_count',
        'start_date',
        'end_date',
        'is_active'
    ]
    list_filter = ['type', 'is_active', 'start_date', 'end_date']
    search_fields = ['title', 'description', 'target_school', 'target_region']
    prepopulated_fields = {'slug': ('title',)}
    filter_horizontal = ['featured_students']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'end_date'

    def save_model(self, request, obj, form, change):
        if not change and obj.created_by_id is None:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)
