from rest_framework import serializers
from apps.pages.formatting import calculate_progress
from .models import Student, StudentNeed, ImpactUpdate, StudentStatus


class StudentNeedSerializer(serializers.ModelSerializer):
    """Serializer for a student's funding needs."""

    category_display = serializers.CharField(source='get_category_display', read_only=True)

    class Meta:
        model = StudentNeed
        fields = [
            'id',
            'student',
            'category',
            'category_display',
            'title',
            'description',
            'amount_needed',
            'amount_raised',
            'priority',
            'period',
            'start_date',
            'end_date',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'student', 'amount_raised', 'created_at', 'updated_at']


class ImpactUpdateSerializer(serializers.ModelSerializer):

    class Meta:
        model = ImpactUpdate
        fields = [
            'id',
            'student',
            'title',
            'content',
            'media_urls',
            'type',
            'is_public',
            'created_at',
            'created_by',
        ]
        read_only_fields = ['id', 'student', 'created_at', 'created_by']


class StudentListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for listing cards."""

    full_name = serializers.CharField(read_only=True)
    progress = serializers.SerializerMethodField()

    class Meta:
        model = Student
        fields = [
            'id',
            'slug',
            'first_name',
            'last_name',
            'full_name',
            'photo_url',
            'school_name',
            'school_type',
            'school_grade',
            'school_city',
            'school_state',
            'total_needed',
            'total_raised',
            'progress',
            'is_fully_funded',
            'featured',
            'priority',
            'created_at',
        ]
        read_only_fields = fields

    def get_progress(self, obj):
        return calculate_progress(obj.total_raised, obj.total_needed)


class StudentSerializer(StudentListSerializer):
    """Full public profile of an approved student."""

    needs = StudentNeedSerializer(many=True, read_only=True)

    class Meta(StudentListSerializer.Meta):
        fields = StudentListSerializer.Meta.fields + [
            'gender',
            'school_address',
            'school_country',
            'additional_photos',
            'video_url',
            'story',
            'family_background',
            'academic_performance',
            'aspirations',
            'funding_deadline',
            'needs',
            'updated_at',
        ]
        read_only_fields = fields


class StudentSubmissionSerializer(serializers.ModelSerializer):
    """Input for a new student case."""

    class Meta:
        model = Student
        fields = [
            'first_name',
            'last_name',
            'date_of_birth',
            'gender',
            'school_name',
            'school_type',
            'school_grade',
            'school_address',
            'school_city',
            'school_state',
            'school_country',
            'photo_url',
            'additional_photos',
            'video_url',
            'story',
            'family_background',
            'academic_performance',
            'aspirations',
            'submitter_name',
            'submitter_email',
            'submitter_phone',
            'submitter_relationship',
            'submitter_organization',
            'total_needed',
            'funding_deadline',
        ]


class StudentAdminSerializer(serializers.ModelSerializer):
    """Everything, including submitter and review fields, for reviewers."""

    full_name = serializers.CharField(read_only=True)
    reviewed_by_email = serializers.EmailField(source='reviewed_by.email', read_only=True, default=None)

    class Meta:
        model = Student
        fields = '__all__'
        read_only_fields = [
            'id',
            'slug',
            'status',
            'total_raised',
            'is_fully_funded',
            'submitted_at',
            'reviewed_at',
            'reviewed_by',
            'created_at',
            'updated_at',
        ]


class StudentReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[
        StudentStatus.APPROVED,
        StudentStatus.REJECTED,
        StudentStatus.ARCHIVED,
    ])
    rejection_reason = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if attrs['status'] == StudentStatus.REJECTED and not attrs.get('rejection_reason'):
            raise serializers.ValidationError({
                'rejection_reason': 'A reason is required when rejecting a student.'
            })
        return attrs
