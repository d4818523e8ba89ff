"""Card payment intents with Stripe."""

import stripe
import structlog
from decimal import Decimal
from django.conf import settings
from typing import Optional

from apps.accounts.models import Donor
from apps.students.models import Student, StudentNeed, StudentStatus
from .currency import is_supported_currency, to_minor_units
from .donation_records import create_donation
from .exceptions import InvalidDonationError, PaymentProviderError


logger = structlog.get_logger(__name__)


def _build_metadata(*, student, donor, donor_email, is_anonymous, message, need) -> dict:
    # Stripe metadata values are strings
    metadata = {
        'studentId': str(student.id),
        'studentName': student.full_name,
        'donorId': str(donor.id) if donor else 'anonymous',
        'donorEmail': donor_email or '',
        'isAnonymous': 'true' if is_anonymous else 'false',
        'message': (message or '')[:500],
    }
    if need is not None:
        metadata['needId'] = str(need.id)
    return metadata


def create_payment_intent(
    *,
    amount: Decimal,
    currency: str,
    student: Student,
    donor: Optional[Donor] = None,
    donor_email: str = '',
    donor_name: str = '',
    is_anonymous: bool = False,
    message: str = '',
    need: Optional[StudentNeed] = None,
) -> dict:
    """
    Create a Stripe PaymentIntent and the pending donation bound to it.

    The amount is given in major units and sent to Stripe in minor units
    with a lower-case currency code. The webhook later completes the
    donation found by the intent id.

    Args:
        amount: Donation amount in major units (e.g. 2500 for INR 2,500)
        currency: 'USD' or 'INR'
        student: Approved student receiving the gift
        donor: Signed-in donor, or None for a guest
        donor_email: Receipt email (defaults to the donor's email)
        is_anonymous: Hide the donor's name publicly
        message: Optional note to the student
        need: Optional need the gift is earmarked for

    Returns:
        Dictionary with client_secret, payment_intent_id and donation_id

    Raises:
        InvalidDonationError: If amount, currency or student is not acceptable
        PaymentProviderError: If Stripe rejects the request
    """
    if amount is None or Decimal(str(amount)) <= 0:
        raise InvalidDonationError("Donation amount must be greater than zero.")

    if not is_supported_currency(currency):
        raise InvalidDonationError(f"Unsupported currency '{currency}'.")

    if student.status != StudentStatus.APPROVED:
        raise InvalidDonationError("This student is not accepting donations.")

    if need is not None and need.student_id != student.id:
        raise InvalidDonationError("Need does not belong to this student.")

    donor_email = donor_email or (donor.email if donor else '')
    minor_amount = to_minor_units(amount)

    try:
        intent = stripe.PaymentIntent.create(
            amount=minor_amount,
            currency=currency.lower(),
            metadata=_build_metadata(
                student=student,
                donor=donor,
                donor_email=donor_email,
                is_anonymous=is_anonymous,
                message=message,
                need=need,
            ),
            automatic_payment_methods={'enabled': True},
            api_key=settings.STRIPE_SECRET_KEY,
            stripe_version=settings.STRIPE_API_VERSION,
        )
    except stripe.StripeError as e:
        logger.error(
            'payment_intent_failed',
            student_id=str(student.id),
            amount=minor_amount,
            currency=currency.lower(),
            error=str(e),
        )
        raise PaymentProviderError("Failed to create payment intent") from e

    donation = create_donation(
        student=student,
        amount=amount,
        currency=currency,
        donor=donor,
        donor_name=donor_name,
        donor_email=donor_email,
        is_anonymous=is_anonymous,
        need=need,
        message=message,
        stripe_payment_intent_id=intent['id'],
    )

    logger.info(
        'payment_intent_created',
        payment_intent_id=intent['id'],
        donation_id=str(donation.id),
        student_id=str(student.id),
        amount=minor_amount,
        currency=currency.lower(),
    )

    return {
        'client_secret': intent['client_secret'],
        'payment_intent_id': intent['id'],
        'donation_id': donation.id,
    }
