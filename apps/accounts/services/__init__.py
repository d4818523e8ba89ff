"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DonorRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
    InvalidProviderTokenError,
    DonorNotFoundError,
)
from .donor_registration import register_donor
from .donor_authentication import authenticate_donor, record_login
from .provider_sign_in import sign_in_with_google, verify_google_id_token
from .password_reset import request_password_reset, confirm_password_reset
from .donor_profiles import get_donor_profile, get_donor_role, update_donor_profile

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DonorRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidTokenError',
    'InvalidProviderTokenError',
    'DonorNotFoundError',
    # Services
    'register_donor',
    'authenticate_donor',
    'record_login',
    'sign_in_with_google',
    'verify_google_id_token',
    'request_password_reset',
    'confirm_password_reset',
    'get_donor_profile',
    'get_donor_role',
    'update_donor_profile',
]
