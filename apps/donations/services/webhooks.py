"""Stripe webhook verification and dispatch."""

import json
from uuid import UUID

import stripe
import structlog
from django.conf import settings
from django.db import transaction
from typing import Optional

from apps.accounts.models import Donor
from apps.students.models import Student, StudentNeed
from ..models import Donation, StripeEvent, PaymentMethod
from .currency import from_minor_units
from .donation_records import create_donation, complete_donation, fail_donation
from .exceptions import InvalidDonationError, WebhookVerificationError


logger = structlog.get_logger(__name__)

PAYMENT_SUCCEEDED = 'payment_intent.succeeded'
PAYMENT_FAILED = 'payment_intent.payment_failed'


def verify_webhook(payload: bytes, signature: Optional[str]) -> dict:
    """
    Verify the Stripe-Signature header and decode the event.

    Raises:
        WebhookVerificationError: If the header is missing, the signature
            does not match or the payload is not JSON
    """
    if not signature:
        raise WebhookVerificationError("Missing stripe-signature header")

    if isinstance(payload, bytes):
        payload = payload.decode('utf-8')

    try:
        stripe.WebhookSignature.verify_header(
            payload,
            signature,
            settings.STRIPE_WEBHOOK_SECRET,
        )
    except stripe.SignatureVerificationError as e:
        logger.warning('webhook_signature_invalid', error=str(e))
        raise WebhookVerificationError("Webhook signature verification failed") from e

    try:
        return json.loads(payload)
    except ValueError as e:
        raise WebhookVerificationError("Invalid webhook payload") from e


def _payment_method_from_intent(intent: dict) -> str:
    method_types = intent.get('payment_method_types') or []
    for method in method_types:
        if method in PaymentMethod.values:
            return method
    return PaymentMethod.CARD


def _metadata_uuid(intent: dict, key: str) -> Optional[UUID]:
    value = (intent.get('metadata') or {}).get(key)
    if not value or value == 'anonymous':
        return None
    try:
        return UUID(str(value))
    except ValueError:
        logger.warning(
            'webhook_invalid_metadata_id',
            payment_intent_id=intent.get('id'),
            key=key,
            value=value,
        )
        return None


def _donation_from_metadata(intent: dict) -> Optional[Donation]:
    """Create the donation for an intent that was made outside this app."""
    metadata = intent.get('metadata') or {}
    student_id = _metadata_uuid(intent, 'studentId')
    if student_id is None:
        logger.error(
            'webhook_missing_student_id',
            payment_intent_id=intent.get('id'),
            student_id=metadata.get('studentId'),
        )
        return None

    student = Student.objects.filter(id=student_id).first()
    if student is None:
        logger.error(
            'webhook_unknown_student',
            payment_intent_id=intent.get('id'),
            student_id=str(student_id),
        )
        return None

    donor = None
    donor_id = _metadata_uuid(intent, 'donorId')
    if donor_id is not None:
        donor = Donor.objects.filter(id=donor_id).first()

    need = None
    need_id = _metadata_uuid(intent, 'needId')
    if need_id is not None:
        need = StudentNeed.objects.filter(id=need_id, student=student).first()

    return create_donation(
        student=student,
        amount=from_minor_units(intent['amount']),
        currency=intent['currency'],
        donor=donor,
        donor_email=metadata.get('donorEmail', ''),
        is_anonymous=metadata.get('isAnonymous') == 'true',
        need=need,
        message=metadata.get('message', ''),
        stripe_payment_intent_id=intent['id'],
    )


def _handle_payment_succeeded(intent: dict) -> None:
    donation = Donation.objects.filter(stripe_payment_intent_id=intent['id']).first()
    try:
        if donation is None:
            donation = _donation_from_metadata(intent)
            if donation is None:
                return

        complete_donation(
            donation_id=donation.id,
            stripe_charge_id=intent.get('latest_charge') or '',
            payment_method=_payment_method_from_intent(intent),
        )
    except InvalidDonationError as e:
        logger.warning(
            'webhook_donation_not_completable',
            payment_intent_id=intent['id'],
            donation_id=str(donation.id) if donation else None,
            status=donation.status if donation else None,
            error=str(e),
        )


def _handle_payment_failed(intent: dict) -> None:
    last_error = intent.get('last_payment_error') or {}
    reason = last_error.get('message', '')

    logger.warning(
        'payment_intent_payment_failed',
        payment_intent_id=intent['id'],
        error_code=last_error.get('code'),
        error_message=reason,
    )

    donation = Donation.objects.filter(stripe_payment_intent_id=intent['id']).first()
    if donation is not None:
        fail_donation(donation_id=donation.id, reason=reason)


EVENT_HANDLERS = {
    PAYMENT_SUCCEEDED: _handle_payment_succeeded,
    PAYMENT_FAILED: _handle_payment_failed,
}


@transaction.atomic
def handle_webhook_event(event: dict) -> bool:
    """
    Apply a verified webhook event.

    Each event id is processed once. Unhandled types are acknowledged
    and logged.

    Returns:
        True if the event was processed, False if it was a replay
    """
    event_type = event.get('type', '')
    data_object = (event.get('data') or {}).get('object') or {}

    _, created = StripeEvent.objects.get_or_create(
        event_id=event['id'],
        defaults={
            'type': event_type,
            'object_id': data_object.get('id') or '',
            'livemode': bool(event.get('livemode', False)),
        },
    )
    if not created:
        logger.info('webhook_event_replayed', event_id=event['id'], type=event_type)
        return False

    handler = EVENT_HANDLERS.get(event_type)
    if handler is None:
        logger.info('webhook_event_unhandled', event_id=event['id'], type=event_type)
        return True

    handler(data_object)
    logger.info('webhook_event_processed', event_id=event['id'], type=event_type)
    return True
