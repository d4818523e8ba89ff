import pytest
from decimal import Decimal
from io import StringIO
from django.core.management import call_command
from apps.accounts.models import Donor
from apps.campaigns.models import Campaign
from apps.donations.models import Donation, DonationStatus
from apps.students.models import Student, StudentStatus


@pytest.mark.django_db
class TestCreateSampleData:

    def test_creates_consistent_sample_data(self):
        call_command('create_sample_data', stdout=StringIO())

        assert Donor.objects.count() == 4
        assert Student.objects.filter(status=StudentStatus.APPROVED).count() == 4
        assert Student.objects.filter(status=StudentStatus.PENDING).count() == 1
        assert Donation.objects.filter(status=DonationStatus.COMPLETED).count() == 5

        priya = Student.objects.get(slug='priya-sharma')
        assert priya.total_raised == Decimal('12500.00')
        assert priya.needs.count() == 3

        ananya = Student.objects.get(slug='ananya-iyer')
        assert ananya.is_fully_funded is True

        campaign = Campaign.objects.get(slug='back-to-school-2026')
        assert campaign.featured_students.count() == 4

    def test_running_twice_does_not_duplicate(self):
        call_command('create_sample_data', stdout=StringIO())
        call_command('create_sample_data', stdout=StringIO())

        assert Student.objects.count() == 6
        assert Donation.objects.count() == 5

    def test_clear(self):
        call_command('create_sample_data', stdout=StringIO())
        call_command('create_sample_data', '--clear', stdout=StringIO())

        assert Student.objects.count() == 6
        assert Donation.objects.count() == 5
        assert Donor.objects.filter(email='asha@example.com').count() == 1
