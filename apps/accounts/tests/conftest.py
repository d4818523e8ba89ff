import pytest
from unittest.mock import Mock
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import Donor, DonorRole


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def donor(db):
    """Create and return a test donor."""
    return Donor.objects.create_user(
        email='testdonor@example.com',
        password='TestPass123!',
        display_name='Test Donor',
    )


@pytest.fixture
def donor_inactive(db):
    """Create and return an inactive donor."""
    return Donor.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        display_name='Inactive Donor',
        is_active=False,
    )


@pytest.fixture
def anonymous_donor(db):
    """Donor who asked to stay anonymous on public pages."""
    return Donor.objects.create_user(
        email='quiet@example.com',
        password='TestPass123!',
        display_name='Quiet Giver',
        is_anonymous=True,
    )


@pytest.fixture
def platform_admin(db):
    """Create and return a donor with the admin role."""
    return Donor.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        display_name='Platform Admin',
        role=DonorRole.ADMIN,
    )


@pytest.fixture
def authenticated_client(api_client, donor):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(donor)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def donor_with_reset_token(db):
    """Create a donor with a password reset token."""
    donor = Donor.objects.create_user(
        email='resetdonor@example.com',
        password='OldPass123!',
        display_name='Reset Donor',
    )
    donor.reset_token = 'valid-reset-token-12345'
    donor.save()
    return donor


@pytest.fixture
def google_claims(settings):
    """Claims returned by Google's token-info endpoint for a valid token."""
    return {
        'aud': settings.GOOGLE_OAUTH_CLIENT_ID,
        'iss': 'https://accounts.google.com',
        'email': 'googler@example.com',
        'email_verified': 'true',
        'name': 'Google Donor',
        'picture': 'https://example.com/photo.jpg',
    }


@pytest.fixture
def tokeninfo_response(google_claims):
    """Build a fake requests response for the token-info endpoint."""
    def _response(status_code=200, claims=None):
        response = Mock()
        response.status_code = status_code
        response.json.return_value = google_claims if claims is None else claims
        return response
    return _response
