from django.contrib import admin
from django.utils import timezone
from apps.students.models import Student, StudentNeed, ImpactUpdate, StudentStatus


class StudentNeedInline(admin.TabularInline):
    """Inline admin for a student's needs."""
    model = StudentNeed
    extra = 1
    fields = [
        'category',
        'title',
        'amount_needed',
        'amount_raised',
        'priority',
        'period',
        'status'
    ]
    readonly_fields = ['amount_raised']


class ImpactUpdateInline(admin.StackedInline):
    model = ImpactUpdate
    extra = 0
    fields = ['title', 'type', 'content', 'is_public', 'created_by']


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    """Admin interface for student cases and their review."""

    list_display = [
        'full_name',
        'school_name',
        'status',
        'total_needed',
        'total_raised',
        'is_fully_funded',
        'featured',
        'priority',
        'submitted_at'
    ]
    list_filter = [
        'status',
        'featured',
        'is_fully_funded',
        'school_type',
        'submitter_relationship',
        'submitted_at'
    ]
    search_fields = [
        'first_name',
        'last_name',
        'school_name',
        'school_city',
        'submitter_name',
        'submitter_email'
    ]
    readonly_fields = [
        'slug',
        'total_raised',
        'is_fully_funded',
        'submitted_at',
        'reviewed_at',
        'reviewed_by',
        'created_at',
        'updated_at'
    ]
    inlines = [StudentNeedInline, ImpactUpdateInline]
    date_hierarchy = 'submitted_at'
    ordering = ['-submitted_at']

    fieldsets = (
        ('Student', {
            'fields': (
                'first_name',
                'last_name',
                'date_of_birth',
                'gender',
                'slug'
            )
        }),
        ('School', {
            'fields': (
                'school_name',
                'school_type',
                'school_grade',
                'school_address',
                'school_city',
                'school_state',
                'school_country'
            )
        }),
        ('Story', {
            'fields': (
                'photo_url',
                'additional_photos',
                'video_url',
                'story',
                'family_background',
                'academic_performance',
                'aspirations'
            )
        }),
        ('Submitted By', {
            'fields': (
                'submitter_name',
                'submitter_email',
                'submitter_phone',
                'submitter_relationship',
                'submitter_organization'
            ),
            'classes': ('collapse',)
        }),
        ('Funding', {
            'fields': (
                'total_needed',
                'total_raised',
                'is_fully_funded',
                'funding_deadline',
                'featured',
                'priority'
            )
        }),
        ('Review', {
            'fields': (
                'status',
                'rejection_reason',
                'submitted_at',
                'reviewed_at',
                'reviewed_by'
            )
        }),
    )

    actions = ['approve_students', 'reject_students', 'feature_students']

    def _review(self, request, queryset, new_status):
        return queryset.update(
            status=new_status,
            reviewed_by=request.user,
            reviewed_at=timezone.now()
        )

    @admin.action(description='Approve selected students')
    def approve_students(self, request, queryset):
        count = self._review(request, queryset.filter(status=StudentStatus.PENDING), StudentStatus.APPROVED)
        self.message_user(request, f"Approved {count} students")

    @admin.action(description='Reject selected students')
    def reject_students(self, request, queryset):
        count = self._review(request, queryset.filter(status=StudentStatus.PENDING), StudentStatus.REJECTED)
        self.message_user(request, f"Rejected {count} students")

    @admin.action(description='Feature selected students')
    def feature_students(self, request, queryset):
        count = queryset.filter(status=StudentStatus.APPROVED).update(featured=True)
        self.message_user(request, f"Featured {count} students")


@admin.register(StudentNeed)
class StudentNeedAdmin(admin.ModelAdmin):
    """Admin interface for student needs."""

    list_display = [
        'title',
        'student',
        'category',
        'priority',
        'amount_needed',
        'amount_raised',
        'status'
    ]
    list_filter = ['category', 'priority', 'status', 'period']
    search_fields = ['title', 'student__first_name', 'student__last_name']
    readonly_fields = ['amount_raised', 'created_at', 'updated_at']


@admin.register(ImpactUpdate)
class ImpactUpdateAdmin(admin.ModelAdmin):
    list_display = ['title', 'student', 'type', 'is_public', 'created_at']
    list_filter = ['type', 'is_public', 'created_at']
    search_fields = ['title', 'content', 'student__first_name', 'student__last_name']
    readonly_fields = ['created_at']
