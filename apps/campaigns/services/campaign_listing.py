"""Campaign queries."""

from django.db.models import QuerySet
from django.utils import timezone
from typing import Optional

from ..models import Campaign


def get_active_campaigns() -> QuerySet[Campaign]:
    """Active campaigns that have not ended, soonest end first."""
    return Campaign.objects.filter(
        is_active=True,
        end_date__gt=timezone.now(),
    ).prefetch_related('featured_students').order_by('end_date')


def get_campaign_by_slug(slug: str) -> Optional[Campaign]:
    return Campaign.objects.prefetch_related('featured_students').filter(slug=slug).first()
