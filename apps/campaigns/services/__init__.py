"""Services for campaigns and platform statistics."""

from .campaign_listing import (
    get_active_campaigns,
    get_campaign_by_slug,
)
from .statistics import (
    get_global_stats,
)

__all__ = [
    # Listing
    'get_active_campaigns',
    'get_campaign_by_slug',
    # Statistics
    'get_global_stats',
]
