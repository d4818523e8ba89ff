import io
import pytest
from datetime import timedelta
from decimal import Decimal
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from PIL import Image
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Donor, DonorRole
from apps.campaigns.models import Campaign
from apps.donations.models import Donation, DonationType
from apps.students.models import Student, StudentStatus


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Store uploads under a per-test temporary directory."""
    settings.MEDIA_ROOT = str(tmp_path)
    settings.MEDIA_URL = '/media/'
    settings.SITE_URL = 'https://testserver.example'
    return tmp_path


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def donor(db):
    return Donor.objects.create_user(
        email='donor@example.com',
        password='TestPass123!',
        display_name='Test Donor',
    )


@pytest.fixture
def platform_admin(db):
    return Donor.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        display_name='Platform Admin',
        role=DonorRole.ADMIN,
    )


@pytest.fixture
def authenticated_client(api_client, donor):
    refresh = RefreshToken.for_user(donor)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def admin_api_client(platform_admin):
    client = APIClient()
    refresh = RefreshToken.for_user(platform_admin)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


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
def offline_donation(student, platform_admin):
    return Donation.objects.create(
        student=student,
        student_name=student.full_name,
        amount=Decimal('1000.00'),
        currency='INR',
        type=DonationType.OFFLINE,
        offline_method='cash',
        recorded_by=platform_admin,
    )


@pytest.fixture
def campaign(db):
    now = timezone.now()
    return Campaign.objects.create(
        title='Back to School',
        goal_amount=Decimal('100000.00'),
        start_date=now,
        end_date=now + timedelta(days=30),
        slug='back-to-school',
    )


@pytest.fixture
def make_image():
    """Factory for small in-memory image uploads."""
    def _make(name='photo.png', image_format='PNG'):
        buffer = io.BytesIO()
        Image.new('RGB', (4, 4), color=(200, 120, 40)).save(buffer, format=image_format)
        return SimpleUploadedFile(name, buffer.getvalue(), content_type=f'image/{image_format.lower()}')
    return _make


@pytest.fixture
def pdf_file():
    return SimpleUploadedFile('report.pdf', b'%PDF-1.4 test report', content_type='application/pdf')
