"""Display helpers shared by templates, template tags and services."""

import re
from datetime import datetime, date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from babel.numbers import format_compact_decimal, format_currency as babel_format_currency
from django.utils import timezone
from django.utils.timesince import timesince


# Whole units only. INR groups lakhs and crores: 12,34,567
CURRENCY_FORMATS = {
    'INR': ('en_IN', '¤#,##,##0'),
}
DEFAULT_CURRENCY_FORMAT = ('en_US', '¤#,##0')

NEED_CATEGORY_LABELS = {
    'tuition': 'Tuition Fees',
    'books': 'Books & Materials',
    'uniforms': 'Uniforms',
    'supplies': 'School Supplies',
    'transportation': 'Transportation',
    'meals': 'Meals',
    'medical': 'Medical',
    'other': 'Other Needs',
}

SCHOOL_TYPE_LABELS = {
    'primary': 'Primary School',
    'secondary': 'Secondary School',
    'high_school': 'High School',
    'college': 'College',
}

NEED_PRIORITY_CLASSES = {
    'urgent': 'text-red-600 bg-red-100',
    'high': 'text-orange-600 bg-orange-100',
    'medium': 'text-yellow-600 bg-yellow-100',
    'low': 'text-green-600 bg-green-100',
}
DEFAULT_PRIORITY_CLASS = 'text-gray-600 bg-gray-100'

Number = Union[int, float, Decimal]


def format_currency(amount: Number, currency: str = 'INR') -> str:
    """
    Format an amount with no fraction digits.

    INR uses Indian digit grouping, everything else western grouping.

    Example:
        >>> format_currency(250000)
        '₹2,50,000'
        >>> format_currency(1234.6, 'USD')
        '$1,235'
    """
    currency = (currency or 'INR').upper()
    locale, pattern = CURRENCY_FORMATS.get(currency, DEFAULT_CURRENCY_FORMAT)
    rounded = Decimal(str(amount)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return babel_format_currency(
        rounded,
        currency,
        format=pattern,
        locale=locale,
        currency_digits=False,
    )


def format_number(num: Number) -> str:
    """Compact a count: 1500 -> '1.5K', 2000000 -> '2M'."""
    return format_compact_decimal(num, locale='en_US', fraction_digits=1)


def format_date(value: Union[date, datetime]) -> str:
    """Long US style date, e.g. 'March 5, 2024'."""
    return f'{value:%B} {value.day}, {value.year}'


def format_relative_time(value: datetime, now: Optional[datetime] = None) -> str:
    """Human relative time for the last week, then a long date."""
    now = now or timezone.now()
    seconds = (now - value).total_seconds()

    if seconds < 60:
        return 'just now'
    if seconds < 604800:
        return timesince(value, now, depth=1).replace('\xa0', ' ') + ' ago'
    return format_date(value)


def calculate_progress(raised: Number, needed: Number) -> int:
    """Percent funded, rounded and capped at 100. Zero when nothing is needed."""
    if not needed:
        return 0
    progress = Decimal(str(raised)) / Decimal(str(needed)) * 100
    progress = int(progress.quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    return max(0, min(progress, 100))


def generate_slug(text: str) -> str:
    slug = re.sub(r'[^a-z0-9]+', '-', text.lower())
    return slug.strip('-')


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + '...'


def get_initials(name: str) -> str:
    """First letters of the first two words, upper-cased."""
    initials = ''.join(part[0] for part in name.split() if part)
    return initials.upper()[:2]


def get_need_category_label(category: str) -> str:
    return NEED_CATEGORY_LABELS.get(category, category)


def get_school_type_label(school_type: str) -> str:
    return SCHOOL_TYPE_LABELS.get(school_type, school_type)


def get_need_priority_classes(priority: str) -> str:
    return NEED_PRIORITY_CLASSES.get(priority, DEFAULT_PRIORITY_CLASS)
