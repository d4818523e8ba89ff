"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class DonorRegistrationError(AccountsServiceError):
    """Raised when donor registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class InvalidTokenError(AccountsServiceError):
    """Raised when a password reset token is invalid."""
    pass


class InvalidProviderTokenError(AccountsServiceError):
    """Raised when an identity provider token cannot be verified."""
    pass


class DonorNotFoundError(AccountsServiceError):
    """Raised when donor does not exist."""
    pass
