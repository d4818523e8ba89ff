from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class CampaignType(models.TextChoices):
    GENERAL = 'general', 'General'
    CATEGORY = 'category', 'Need Category'
    SCHOOL = 'school', 'School'
    REGION = 'region', 'Region'


class Campaign(models.Model):
    """Time-boxed fundraising drive, optionally targeting a category, school or region."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    cover_image_url = models.URLField(max_length=500, blank=True)

    goal_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    raised_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    donor_count = models.PositiveIntegerField(default=0)

    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    is_active = models.BooleanField(default=True)

    type = models.CharField(max_length=20, choices=CampaignType.choices, default=CampaignType.GENERAL)
    target_category = models.CharField(max_length=20, blank=True)
    target_school = models.CharField(max_length=200, blank=True)
    target_region = models.CharField(max_length=100, blank=True)
    featured_students = models.ManyToManyField(
        'students.Student',
        blank=True,
        related_name='campaigns'
    )

    slug = models.SlugField(max_length=220, unique=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='campaigns_created'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'campaigns'
        indexes = [
            models.Index(fields=['is_active', 'end_date'], name='campaigns_active_idx'),
        ]
        ordering = ['end_date']

    def __str__(self):
        return self.title
