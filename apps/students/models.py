from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class StudentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending Review'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'
    ARCHIVED = 'archived', 'Archived'


class Gender(models.TextChoices):
    MALE = 'male', 'Male'
    FEMALE = 'female', 'Female'
    OTHER = 'other', 'Other'


class SchoolType(models.TextChoices):
    PRIMARY = 'primary', 'Primary School'
    SECONDARY = 'secondary', 'Secondary School'
    HIGH_SCHOOL = 'high_school', 'High School'
    COLLEGE = 'college', 'College'


class SubmitterRelationship(models.TextChoices):
    TEACHER = 'teacher', 'Teacher'
    PRINCIPAL = 'principal', 'Principal'
    NGO_WORKER = 'ngo_worker', 'NGO Worker'
    FAMILY = 'family', 'Family'
    COMMUNITY_MEMBER = 'community_member', 'Community Member'


class NeedCategory(models.TextChoices):
    TUITION = 'tuition', 'Tuition Fees'
    BOOKS = 'books', 'Books & Materials'
    UNIFORMS = 'uniforms', 'Uniforms'
    SUPPLIES = 'supplies', 'School Supplies'
    TRANSPORTATION = 'transportation', 'Transportation'
    MEALS = 'meals', 'Meals'
    MEDICAL = 'medical', 'Medical'
    OTHER = 'other', 'Other Needs'


class NeedPriority(models.TextChoices):
    URGENT = 'urgent', 'Urgent'
    HIGH = 'high', 'High'
    MEDIUM = 'medium', 'Medium'
    LOW = 'low', 'Low'


# Higher rank sorts first
NEED_PRIORITY_RANK = {
    NeedPriority.URGENT: 4,
    NeedPriority.HIGH: 3,
    NeedPriority.MEDIUM: 2,
    NeedPriority.LOW: 1,
}


class NeedPeriod(models.TextChoices):
    ONE_TIME = 'one_time', 'One Time'
    MONTHLY = 'monthly', 'Monthly'
    QUARTERLY = 'quarterly', 'Quarterly'
    YEARLY = 'yearly', 'Yearly'


class NeedStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    FULFILLED = 'fulfilled', 'Fulfilled'
    CANCELLED = 'cancelled', 'Cancelled'


class UpdateType(models.TextChoices):
    PROGRESS = 'progress', 'Progress'
    ACHIEVEMENT = 'achievement', 'Achievement'
    THANK_YOU = 'thank_you', 'Thank You'
    MILESTONE = 'milestone', 'Milestone'


class Student(models.Model):
    """A student case listed for funding."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Identity
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=10, choices=Gender.choices, default=Gender.OTHER)

    # School
    school_name = models.CharField(max_length=200, db_index=True)
    school_type = models.CharField(max_length=20, choices=SchoolType.choices, default=SchoolType.SECONDARY)
    school_grade = models.CharField(max_length=50, blank=True)
    school_address = models.CharField(max_length=300, blank=True)
    school_city = models.CharField(max_length=100, blank=True)
    school_state = models.CharField(max_length=100, blank=True)
    school_country = models.CharField(max_length=100, blank=True)

    # Media
    photo_url = models.URLField(max_length=500, blank=True)
    additional_photos = models.JSONField(default=list, blank=True)
    video_url = models.URLField(max_length=500, blank=True)

    # Story
    story = models.TextField(blank=True)
    family_background = models.TextField(blank=True)
    academic_performance = models.TextField(blank=True)
    aspirations = models.TextField(blank=True)

    # Review workflow
    status = models.CharField(max_length=20, choices=StudentStatus.choices, default=StudentStatus.PENDING)
    submitted_at = models.DateTimeField(auto_now_add=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)
    reviewed_by = models.ForeignKey(
        'accounts.Donor',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviewed_students'
    )
    rejection_reason = models.TextField(blank=True)

    # Submitter (who vouched for the case)
    submitter_name = models.CharField(max_length=200)
    submitter_email = models.EmailField(max_length=255)
    submitter_phone = models.CharField(max_length=30, blank=True)
    submitter_relationship = models.CharField(
        max_length=30,
        choices=SubmitterRelationship.choices,
        default=SubmitterRelationship.TEACHER
    )
    submitter_organization = models.CharField(max_length=200, blank=True)

    # Funding
    total_needed = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        default=Decimal('0.00')
    )
    total_raised = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    is_fully_funded = models.BooleanField(default=False)
    funding_deadline = models.DateField(null=True, blank=True)

    # Listing
    slug = models.SlugField(max_length=220, unique=True)
    featured = models.BooleanField(default=False)
    priority = models.IntegerField(default=0)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'students'
        indexes = [
            models.Index(fields=['status', '-priority', '-created_at'], name='students_listing_idx'),
            models.Index(fields=['status', 'featured'], name='students_featured_idx'),
            models.Index(fields=['status', 'submitted_at'], name='students_pending_idx'),
        ]
        ordering = ['-priority', '-created_at']

    def __str__(self):
        return f"{self.full_name} ({self.school_name})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def remaining_amount(self):
        return max(Decimal('0.00'), self.total_needed - self.total_raised)

    def refresh_funding_status(self):
        """Recompute is_fully_funded from the running totals."""
        self.is_fully_funded = self.total_needed > 0 and self.total_raised >= self.total_needed
        return self.is_fully_funded


class StudentNeed(models.Model):
    """A specific expense a student needs funded."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='needs')
    category = models.CharField(max_length=20, choices=NeedCategory.choices, default=NeedCategory.OTHER)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    amount_needed = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    amount_raised = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    priority = models.CharField(max_length=10, choices=NeedPriority.choices, default=NeedPriority.MEDIUM)
    period = models.CharField(max_length=20, choices=NeedPeriod.choices, default=NeedPeriod.ONE_TIME)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=NeedStatus.choices, default=NeedStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'student_needs'
        indexes = [
            models.Index(fields=['student', 'status'], name='needs_student_status_idx'),
            models.Index(fields=['category', 'status'], name='needs_category_status_idx'),
        ]

    def __str__(self):
        return f"{self.title} - {self.student.full_name}"


class ImpactUpdate(models.Model):
    """Progress news posted about a funded student."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='updates')
    title = models.CharField(max_length=200)
    content = models.TextField()
    media_urls = models.JSONField(default=list, blank=True)
    type = models.CharField(max_length=20, choices=UpdateType.choices, default=UpdateType.PROGRESS)
    is_public = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.ForeignKey(
        'accounts.Donor',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='impact_updates'
    )

    class Meta:
        db_table = 'impact_updates'
        indexes = [
            models.Index(fields=['student', 'is_public', '-created_at'], name='updates_student_public_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.student.full_name})"
