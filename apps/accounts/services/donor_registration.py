"""Donor registration service."""

from django.db import IntegrityError, transaction
from django.contrib.auth import get_user_model
import structlog

from ..models import AuthProvider, DEFAULT_DISPLAY_NAME
from .exceptions import DonorRegistrationError

Donor = get_user_model()

logger = structlog.get_logger(__name__)


@transaction.atomic
def register_donor(
    *,
    email: str,
    password: str,
    display_name: str = ""
) -> Donor:
    """
    Register a new donor with email and password.

    The donor profile starts with the platform defaults: not anonymous,
    subscribed to student updates, not subscribed to the newsletter and
    no giving history.

    Args:
        email: Donor's email address
        password: Donor's password (will be hashed)
        display_name: Optional display name

    Returns:
        Created Donor instance

    Raises:
        DonorRegistrationError: If the email is taken or creation fails
    """
    email = Donor.objects.normalize_email(email)

    if Donor.objects.filter(email__iexact=email).exists():
        raise DonorRegistrationError("A donor with this email already exists")

    try:
        donor = Donor.objects.create_user(
            email=email,
            password=password,
            display_name=display_name or DEFAULT_DISPLAY_NAME,
            auth_provider=AuthProvider.EMAIL,
        )
    except IntegrityError as e:
        raise DonorRegistrationError(f"Registration failed: {str(e)}")

    logger.info("donor_registered", donor_id=str(donor.id), provider=AuthProvider.EMAIL)
    return donor
