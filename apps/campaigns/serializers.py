from rest_framework import serializers
from apps.pages.formatting import calculate_progress
from apps.students.serializers import StudentListSerializer
from .models import Campaign


class CampaignSerializer(serializers.ModelSerializer):
    """Serializer for campaigns with their featured students."""

    featured_students = StudentListSerializer(many=True, read_only=True)
    progress = serializers.SerializerMethodField()

    class Meta:
        model = Campaign
        fields = [
            'id',
            'slug',
            'title',
            'description',
            'cover_image_url',
            'goal_amount',
            'raised_amount',
            'progress',
            'donor_count',
            'start_date',
            'end_date',
            'is_active',
            'type',
            'target_category',
            'target_school',
            'target_region',
            'featured_students',
            'created_at',
        ]
        read_only_fields = fields

    def get_progress(self, obj):
        return calculate_progress(obj.raised_amount, obj.goal_amount)


class GlobalStatsSerializer(serializers.Serializer):
    total_students = serializers.IntegerField()
    total_donors = serializers.IntegerField()
    total_raised = serializers.DictField(child=serializers.DecimalField(max_digits=14, decimal_places=2))
    total_donations = serializers.IntegerField()
