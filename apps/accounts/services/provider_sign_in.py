"""Sign-in through an external identity provider (Google)."""

from django.conf import settings
from django.db import transaction
from django.contrib.auth import get_user_model
import requests
import structlog

from ..models import AuthProvider, DEFAULT_DISPLAY_NAME
from .donor_authentication import record_login
from .exceptions import InactiveAccountError, InvalidProviderTokenError

Donor = get_user_model()

logger = structlog.get_logger(__name__)

GOOGLE_ISSUERS = ('accounts.google.com', 'https://accounts.google.com')


def verify_google_id_token(id_token: str) -> dict:
    """
    Verify a Google ID token with Google's token-info endpoint.

    Args:
        id_token: ID token returned to the browser by the Google popup

    Returns:
        Verified claims (email, name, picture, ...)

    Raises:
        InvalidProviderTokenError: If the token is rejected or not meant for us
    """
    if not id_token:
        raise InvalidProviderTokenError("Missing ID token")

    try:
        response = requests.get(
            settings.GOOGLE_TOKENINFO_URL,
            params={'id_token': id_token},
            timeout=settings.GOOGLE_TOKENINFO_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error("google_tokeninfo_unreachable", error=str(e))
        raise InvalidProviderTokenError("Could not verify Google sign-in")

    if response.status_code != 200:
        raise InvalidProviderTokenError("Google rejected the ID token")

    claims = response.json()

    if claims.get('aud') != settings.GOOGLE_OAUTH_CLIENT_ID:
        raise InvalidProviderTokenError("ID token was issued for another application")
    if claims.get('iss') not in GOOGLE_ISSUERS:
        raise InvalidProviderTokenError("ID token has an unexpected issuer")
    if not claims.get('email') or str(claims.get('email_verified')).lower() != 'true':
        raise InvalidProviderTokenError("Google account email is not verified")

    return claims


@transaction.atomic
def sign_in_with_google(*, id_token: str) -> tuple[Donor, bool]:
    """
    Sign a donor in with a Google ID token.

    The donor record is created on first sign-in; later sign-ins only
    refresh last_login.

    Args:
        id_token: Google ID token

    Returns:
        Tuple of (donor, created)

    Raises:
        InvalidProviderTokenError: If the token cannot be verified
        InactiveAccountError: If the matching account is deactivated
    """
    claims = verify_google_id_token(id_token)
    email = Donor.objects.normalize_email(claims['email'])

    donor = (
        Donor.objects
        .select_for_update()
        .filter(email__iexact=email)
        .first()
    )

    if donor is None:
        donor = Donor.objects.create_user(
            email=email,
            password=None,
            display_name=claims.get('name') or DEFAULT_DISPLAY_NAME,
            photo_url=claims.get('picture', ''),
            auth_provider=AuthProvider.GOOGLE,
        )
        record_login(donor)
        logger.info("donor_registered", donor_id=str(donor.id), provider=AuthProvider.GOOGLE)
        return donor, True

    if not donor.is_active:
        raise InactiveAccountError("Account is deactivated")

    record_login(donor)
    return donor, False
