"""Domain-specific exceptions for donations services."""


class DonationsServiceError(Exception):
    """Base exception for donations services."""
    pass


class DonationNotFoundError(DonationsServiceError):
    """Raised when donation does not exist."""
    pass


class InvalidDonationError(DonationsServiceError):
    """Raised when donation input is not acceptable."""
    pass


class PaymentProviderError(DonationsServiceError):
    """Raised when the payment provider rejects or fails a request."""
    pass


class WebhookVerificationError(DonationsServiceError):
    """Raised when a webhook payload cannot be trusted."""
    pass
