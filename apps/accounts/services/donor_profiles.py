"""Donor profile lookups and updates."""

from typing import Optional
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import DonorNotFoundError

Donor = get_user_model()

PROFILE_FIELDS = frozenset({
    'display_name',
    'photo_url',
    'phone',
    'address_line1',
    'address_line2',
    'city',
    'state',
    'postal_code',
    'country',
    'is_anonymous',
    'receive_updates',
    'receive_newsletter',
})


def get_donor_profile(*, donor_id: UUID) -> Optional[Donor]:
    """Return the active donor with this ID, or None."""
    return Donor.objects.filter(id=donor_id, is_active=True).first()


def get_donor_role(*, donor_id: UUID) -> Optional[str]:
    """Return the donor's role, or None when the donor does not exist."""
    return (
        Donor.objects
        .filter(id=donor_id)
        .values_list('role', flat=True)
        .first()
    )


@transaction.atomic
def update_donor_profile(*, donor_id: UUID, **fields) -> Donor:
    """
    Update editable profile fields.

    Unknown or protected fields (role, totals, email) are ignored.

    Raises:
        DonorNotFoundError: If donor does not exist
    """
    try:
        donor = Donor.objects.select_for_update().get(id=donor_id)
    except Donor.DoesNotExist:
        raise DonorNotFoundError(f"Donor {donor_id} not found")

    changed = [name for name in fields if name in PROFILE_FIELDS]
    for name in changed:
        setattr(donor, name, fields[name])

    if changed:
        donor.save(update_fields=changed)

    return donor
