import hashlib
import hmac
import json
import time
import pytest
from decimal import Decimal
from unittest.mock import patch
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Donor, DonorRole
from apps.donations.models import Donation, DonationStatus
from apps.students.models import Student, StudentNeed, StudentStatus, NeedCategory


PAYMENT_INTENT_CREATE = 'apps.donations.services.payment_intents.stripe.PaymentIntent.create'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def donor(db):
    return Donor.objects.create_user(
        email='donor@example.com',
        password='TestPass123!',
        display_name='Generous Donor',
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
        category=NeedCategory.BOOKS,
        title='Textbooks',
        amount_needed=Decimal('2000.00'),
    )


@pytest.fixture
def pending_donation(student, donor):
    return Donation.objects.create(
        student=student,
        student_name=student.full_name,
        donor=donor,
        donor_name=donor.display_name,
        donor_email=donor.email,
        amount=Decimal('2500.00'),
        currency='INR',
        net_amount=Decimal('2500.00'),
        stripe_payment_intent_id='pi_test_123',
        status=DonationStatus.PENDING,
    )


@pytest.fixture
def fake_intent():
    """What stripe.PaymentIntent.create returns for a successful call."""
    return {
        'id': 'pi_test_123',
        'object': 'payment_intent',
        'client_secret': 'pi_test_123_secret_abc',
        'status': 'requires_payment_method',
    }


@pytest.fixture
def mock_intent_create(fake_intent):
    with patch(PAYMENT_INTENT_CREATE, return_value=fake_intent) as mock_create:
        yield mock_create


def sign_payload(payload: str, secret: str, timestamp=None) -> str:
    """Build a Stripe-Signature header for a payload."""
    timestamp = int(timestamp or time.time())
    signed = f'{timestamp}.{payload}'.encode('utf-8')
    signature = hmac.new(secret.encode('utf-8'), signed, hashlib.sha256).hexdigest()
    return f't={timestamp},v1={signature}'


@pytest.fixture
def make_event():
    """Build a webhook event dict for a payment intent."""
    def _make(event_type, intent, event_id='evt_test_1'):
        return {
            'id': event_id,
            'object': 'event',
            'type': event_type,
            'livemode': False,
            'data': {'object': intent},
        }
    return _make


@pytest.fixture
def succeeded_intent(student, donor):
    return {
        'id': 'pi_test_123',
        'object': 'payment_intent',
        'amount': 250000,
        'currency': 'inr',
        'latest_charge': 'ch_test_456',
        'payment_method_types': ['card'],
        'metadata': {
            'studentId': str(student.id),
            'studentName': student.full_name,
            'donorId': str(donor.id),
            'donorEmail': donor.email,
            'isAnonymous': 'false',
            'message': 'Good luck!',
        },
    }


@pytest.fixture
def post_webhook(api_client, settings):
    """POST a signed event to the webhook endpoint."""
    from django.urls import reverse

    def _post(event, signature=None):
        payload = json.dumps(event)
        header = signature if signature is not None else sign_payload(payload, settings.STRIPE_WEBHOOK_SECRET)
        return api_client.post(
            reverse('donations:stripe-webhook'),
            data=payload,
            content_type='application/json',
            HTTP_STRIPE_SIGNATURE=header,
        )
    return _post
