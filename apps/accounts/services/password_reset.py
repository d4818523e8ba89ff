"""Password reset service."""

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction
from django.contrib.auth import get_user_model
from urllib.parse import urlencode
import secrets
import structlog

from .exceptions import DonorNotFoundError, InvalidTokenError

Donor = get_user_model()

logger = structlog.get_logger(__name__)


def build_reset_link(token: str) -> str:
    """Absolute link to the reset-password page for a token."""
    return f"{settings.SITE_URL.rstrip('/')}/auth/reset-password/?{urlencode({'token': token})}"


def send_password_reset_email(*, email: str, token: str) -> None:
    """Send the reset link to the donor."""
    send_mail(
        subject='Reset your password',
        message=(
            'We received a request to reset the password for your '
            'The Education Foundation account.\n\n'
            f'Reset it here: {build_reset_link(token)}\n\n'
            'If you did not ask for this, you can ignore this email.'
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
    )


@transaction.atomic
def request_password_reset(*, email: str) -> str:
    """
    Generate password reset token for donor and email the reset link.

    Args:
        email: Donor's email address

    Returns:
        Reset token

    Raises:
        DonorNotFoundError: If donor does not exist
    """
    try:
        donor = (
            Donor.objects
            .select_for_update()
            .get(email__iexact=email, is_active=True)
        )
    except Donor.DoesNotExist:
        raise DonorNotFoundError(f"No active donor with email: {email}")

    reset_token = secrets.token_urlsafe(32)
    donor.reset_token = reset_token
    donor.save(update_fields=['reset_token'])

    # Send email outside the transaction
    transaction.on_commit(
        lambda: send_password_reset_email(email=donor.email, token=reset_token)
    )

    logger.info("password_reset_requested", donor_id=str(donor.id))
    return reset_token


@transaction.atomic
def confirm_password_reset(*, token: str, new_password: str) -> Donor:
    """
    Reset donor password with token.

    Args:
        token: Reset token
        new_password: New password

    Returns:
        Donor instance

    Raises:
        InvalidTokenError: If token is invalid or expired
    """
    if not token:
        raise InvalidTokenError("Invalid or expired reset token")

    try:
        donor = (
            Donor.objects
            .select_for_update()
            .get(reset_token=token, is_active=True)
        )
    except Donor.DoesNotExist:
        raise InvalidTokenError("Invalid or expired reset token")

    donor.set_password(new_password)
    donor.reset_token = None
    donor.save(update_fields=['password', 'reset_token'])

    logger.info("password_reset_completed", donor_id=str(donor.id))
    return donor
