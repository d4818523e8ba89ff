import pytest
from decimal import Decimal
from unittest.mock import patch
from apps.accounts.models import Donor
from apps.students.models import Student, StudentNeed, StudentStatus, NeedCategory, NeedPriority


PAYMENT_INTENT_CREATE = 'apps.donations.services.payment_intents.stripe.PaymentIntent.create'


@pytest.fixture
def donor(db):
    return Donor.objects.create_user(
        email='donor@example.com',
        password='OldPass123!',
        display_name='Test Donor',
    )


@pytest.fixture
def student(db):
    return Student.objects.create(
        first_name='Priya',
        last_name='Sharma',
        school_name='Delhi Public School',
        school_city='New Delhi',
        story='Priya wants to become a doctor.',
        submitter_name='Meera Teacher',
        submitter_email='meera@example.com',
        total_needed=Decimal('10000.00'),
        total_raised=Decimal('2500.00'),
        status=StudentStatus.APPROVED,
        featured=True,
        slug='priya-sharma',
    )


@pytest.fixture
def other_student(db):
    return Student.objects.create(
        first_name='Rahul',
        last_name='Verma',
        school_name='Kendriya Vidyalaya',
        submitter_name='Meera Teacher',
        submitter_email='meera@example.com',
        total_needed=Decimal('8000.00'),
        status=StudentStatus.APPROVED,
        slug='rahul-verma',
    )


@pytest.fixture
def pending_student(db):
    return Student.objects.create(
        first_name='Arjun',
        last_name='Patel',
        school_name='Zilla Parishad School',
        submitter_name='Ravi Kumar',
        submitter_email='ravi@example.org',
        total_needed=Decimal('5000.00'),
        status=StudentStatus.PENDING,
        slug='arjun-patel',
    )


@pytest.fixture
def need(student):
    return StudentNeed.objects.create(
        student=student,
        category=NeedCategory.TUITION,
        title='Annual tuition',
        amount_needed=Decimal('6000.00'),
        priority=NeedPriority.URGENT,
    )


@pytest.fixture
def mock_intent_create():
    intent = {'id': 'pi_test_123', 'client_secret': 'pi_test_123_secret_abc'}
    with patch(PAYMENT_INTENT_CREATE, return_value=intent) as mock_create:
        yield mock_create
