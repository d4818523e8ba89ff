import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from apps.accounts.models import Donor
from apps.campaigns.models import Campaign, CampaignType
from apps.donations.models import Donation, DonationStatus
from apps.students.models import Student, StudentStatus


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def donor(db):
    return Donor.objects.create_user(
        email='donor@example.com',
        password='TestPass123!',
        display_name='Test Donor',
    )


@pytest.fixture
def student(db):
    return Student.objects.create(
        first_name='Priya',
        last_name='Sharma',
        school_name='Delhi Public School',
        submitter_name='Meera Teacher',
        submitter_email='meera@example.com',
        total_needed=Decimal('10000.00'),
        status=StudentStatus.APPROVED,
        slug='priya-sharma',
    )


@pytest.fixture
def make_campaign(db):
    """Factory for campaigns running from yesterday for a month."""
    def _make(**overrides):
        now = timezone.now()
        data = {
            'title': 'Back to School',
            'goal_amount': Decimal('100000.00'),
            'start_date': now - timedelta(days=1),
            'end_date': now + timedelta(days=30),
            'type': CampaignType.GENERAL,
            'slug': 'back-to-school',
        }
        data.update(overrides)
        return Campaign.objects.create(**data)
    return _make


@pytest.fixture
def campaign(make_campaign, student):
    campaign = make_campaign(raised_amount=Decimal('25000.00'), donor_count=12)
    campaign.featured_students.add(student)
    return campaign


@pytest.fixture
def make_donation(student):
    """Factory for donations to the student fixture."""
    def _make(**overrides):
        data = {
            'student': student,
            'student_name': student.full_name,
            'amount': Decimal('1000.00'),
            'currency': 'INR',
            'status': DonationStatus.COMPLETED,
        }
        data.update(overrides)
        return Donation.objects.create(**data)
    return _make
