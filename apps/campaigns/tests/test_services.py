import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone

from apps.campaigns.services import get_active_campaigns, get_campaign_by_slug, get_global_stats
from apps.donations.models import DonationStatus


@pytest.mark.django_db
class TestCampaignListing:

    def test_active_campaigns_soonest_end_first(self, make_campaign):
        now = timezone.now()
        later = make_campaign(slug='later', end_date=now + timedelta(days=60))
        sooner = make_campaign(slug='sooner', end_date=now + timedelta(days=5))

        assert list(get_active_campaigns()) == [sooner, later]

    def test_ended_and_inactive_excluded(self, make_campaign):
        make_campaign(slug='ended', end_date=timezone.now() - timedelta(hours=1))
        make_campaign(slug='paused', is_active=False)

        assert list(get_active_campaigns()) == []

    def test_get_by_slug_includes_ended(self, make_campaign):
        ended = make_campaign(slug='ended', end_date=timezone.now() - timedelta(days=1))

        assert get_campaign_by_slug('ended') == ended
        assert get_campaign_by_slug('missing') is None


@pytest.mark.django_db
class TestGlobalStats:

    def test_empty_platform(self):
        assert get_global_stats() == {
            'total_students': 0,
            'total_donors': 0,
            'total_raised': {},
            'total_donations': 0,
        }

    def test_counts_completed_donations_only(self, make_donation, donor):
        make_donation(donor=donor, amount=Decimal('1000.00'))
        make_donation(donor=donor, amount=Decimal('500.00'))
        make_donation(amount=Decimal('50.00'), currency='USD')
        make_donation(amount=Decimal('9999.00'), status=DonationStatus.PENDING)
        make_donation(amount=Decimal('7777.00'), status=DonationStatus.FAILED)

        stats = get_global_stats()

        assert stats['total_students'] == 1
        assert stats['total_donors'] == 1
        assert stats['total_donations'] == 3
        assert stats['total_raised'] == {
            'INR': Decimal('1500.00'),
            'USD': Decimal('50.00'),
        }
