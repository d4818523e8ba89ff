"""Currency rules: supported codes, preset amounts and minor-unit conversion."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from django.conf import settings

from ..models import Currency


SUPPORTED_CURRENCIES = [Currency.USD, Currency.INR]

DONATION_AMOUNTS = {
    Currency.USD: [25, 50, 100, 250, 500],
    Currency.INR: [500, 1000, 2500, 5000, 10000],
}

CENTS = Decimal('0.01')


def is_supported_currency(currency: Optional[str]) -> bool:
    return (currency or '').upper() in SUPPORTED_CURRENCIES


def to_minor_units(amount) -> int:
    """
    Convert a major-unit amount to the provider's smallest unit.

    Both supported currencies have 100 minor units (cents, paise).

    Example:
        >>> to_minor_units(Decimal('12.345'))
        1235
    """
    minor = (Decimal(str(amount)) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return int(minor)


def from_minor_units(amount: int) -> Decimal:
    return (Decimal(amount) / 100).quantize(CENTS)


def calculate_platform_fee(amount) -> tuple[Decimal, Decimal]:
    """
    Split an amount into (platform_fee, net_amount).

    Uses settings.PLATFORM_FEE_PERCENT, rounded to cents.
    """
    amount = Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    percent = Decimal(str(settings.PLATFORM_FEE_PERCENT))
    fee = (amount * percent / 100).quantize(CENTS, rounding=ROUND_HALF_UP)
    return fee, amount - fee
