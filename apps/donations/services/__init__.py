"""Services for donations business logic."""

from .exceptions import (
    DonationsServiceError,
    DonationNotFoundError,
    InvalidDonationError,
    PaymentProviderError,
    WebhookVerificationError,
)
from .currency import (
    SUPPORTED_CURRENCIES,
    DONATION_AMOUNTS,
    is_supported_currency,
    to_minor_units,
    from_minor_units,
    calculate_platform_fee,
)
from .donation_records import (
    create_donation,
    complete_donation,
    fail_donation,
    get_donor_donations,
    get_student_donations,
    record_offline_donation,
)
from .payment_intents import (
    create_payment_intent,
)
from .webhooks import (
    verify_webhook,
    handle_webhook_event,
)

__all__ = [
    # Exceptions
    'DonationsServiceError',
    'DonationNotFoundError',
    'InvalidDonationError',
    'PaymentProviderError',
    'WebhookVerificationError',
    # Currency
    'SUPPORTED_CURRENCIES',
    'DONATION_AMOUNTS',
    'is_supported_currency',
    'to_minor_units',
    'from_minor_units',
    'calculate_platform_fee',
    # Records
    'create_donation',
    'complete_donation',
    'fail_donation',
    'get_donor_donations',
    'get_student_donations',
    'record_offline_donation',
    # Payments
    'create_payment_intent',
    # Webhooks
    'verify_webhook',
    'handle_webhook_event',
]
