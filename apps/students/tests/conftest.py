import itertools
import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Donor, DonorRole
from apps.students.models import Student, StudentNeed, StudentStatus, NeedCategory, NeedPriority


_slug_counter = itertools.count(1)


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
def platform_admin(db):
    return Donor.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        display_name='Platform Admin',
        role=DonorRole.ADMIN,
    )


@pytest.fixture
def authenticated_client(api_client, donor):
    """API client authenticated as a regular donor."""
    refresh = RefreshToken.for_user(donor)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def admin_api_client(platform_admin):
    """API client authenticated as a platform admin."""
    client = APIClient()
    refresh = RefreshToken.for_user(platform_admin)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def make_student(db):
    """Factory for students. Approved unless a status is given."""
    def _make(**overrides):
        number = next(_slug_counter)
        data = {
            'first_name': 'Student',
            'last_name': f'Number{number}',
            'school_name': 'Government High School',
            'school_city': 'Jaipur',
            'submitter_name': 'Meera Teacher',
            'submitter_email': 'meera@example.com',
            'total_needed': Decimal('50000.00'),
            'status': StudentStatus.APPROVED,
            'slug': f'student-{number}',
        }
        data.update(overrides)
        return Student.objects.create(**data)
    return _make


@pytest.fixture
def approved_student(make_student):
    return make_student(
        first_name='Priya',
        last_name='Sharma',
        school_name='Delhi Public School',
        slug='priya-sharma',
        story='Priya wants to become a doctor.',
    )


@pytest.fixture
def pending_student(make_student):
    return make_student(
        first_name='Arjun',
        last_name='Patel',
        status=StudentStatus.PENDING,
        slug='arjun-patel',
    )


@pytest.fixture
def tuition_need(approved_student):
    return StudentNeed.objects.create(
        student=approved_student,
        category=NeedCategory.TUITION,
        title='Annual tuition',
        amount_needed=Decimal('30000.00'),
        priority=NeedPriority.HIGH,
    )


@pytest.fixture
def submission_data():
    """Payload for POST /api/students/submit/."""
    return {
        'first_name': 'Kavya',
        'last_name': 'Reddy',
        'gender': 'female',
        'school_name': 'Zilla Parishad School',
        'school_type': 'secondary',
        'school_grade': '8th',
        'school_city': 'Hyderabad',
        'story': 'Kavya walks five kilometres to school every day.',
        'submitter_name': 'Ravi Kumar',
        'submitter_email': 'ravi@example.org',
        'submitter_relationship': 'ngo_worker',
        'total_needed': '24000.00',
    }
