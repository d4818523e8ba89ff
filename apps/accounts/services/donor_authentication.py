"""Donor authentication service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone
import structlog

from .exceptions import InvalidCredentialsError, InactiveAccountError

Donor = get_user_model()

logger = structlog.get_logger(__name__)


@transaction.atomic
def authenticate_donor(*, email: str, password: str) -> Donor:
    """
    Authenticate donor with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: Donor's email
        password: Donor's password

    Returns:
        Authenticated Donor instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    try:
        donor = (
            Donor.objects
            .select_for_update()
            .get(email__iexact=email)
        )
    except Donor.DoesNotExist:
        raise InvalidCredentialsError("Invalid email or password")

    if not donor.check_password(password):
        logger.info("donor_sign_in_rejected", donor_id=str(donor.id))
        raise InvalidCredentialsError("Invalid email or password")

    if not donor.is_active:
        raise InactiveAccountError("Account is deactivated")

    record_login(donor)
    return donor


def record_login(donor: Donor) -> None:
    """Stamp the donor's last sign-in time."""
    donor.last_login = timezone.now()
    donor.save(update_fields=['last_login'])
