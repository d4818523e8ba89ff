"""Donation records and the funding totals they drive."""

import structlog
from decimal import Decimal
from django.db import transaction
from django.db.models import F, QuerySet
from django.utils import timezone
from typing import Optional
from uuid import UUID

from apps.accounts.models import Donor, DEFAULT_DISPLAY_NAME
from apps.students.models import Student, StudentNeed, NeedStatus
from ..models import Donation, DonationStatus, DonationType, OfflineMethod
from .currency import calculate_platform_fee, is_supported_currency
from .exceptions import DonationNotFoundError, InvalidDonationError


logger = structlog.get_logger(__name__)


def _resolve_donor_name(donor: Optional[Donor], donor_name: str, is_anonymous: bool) -> str:
    if is_anonymous:
        return DEFAULT_DISPLAY_NAME
    if donor_name:
        return donor_name
    if donor is not None:
        return donor.get_display_name()
    return DEFAULT_DISPLAY_NAME


@transaction.atomic
def create_donation(
    *,
    student: Student,
    amount: Decimal,
    currency: str,
    donor: Optional[Donor] = None,
    donor_name: str = '',
    donor_email: str = '',
    is_anonymous: bool = False,
    need: Optional[StudentNeed] = None,
    message: str = '',
    **extra
) -> Donation:
    """
    Create a donation record.

    Fee split and the public donor name are derived here. Extra keyword
    arguments (payment ids, offline fields, status) are stored as given.

    Raises:
        InvalidDonationError: If amount or currency is not acceptable,
            or the need belongs to another student
    """
    if amount is None or Decimal(str(amount)) <= 0:
        raise InvalidDonationError("Donation amount must be greater than zero.")

    if not is_supported_currency(currency):
        raise InvalidDonationError(f"Unsupported currency '{currency}'.")

    if need is not None and need.student_id != student.id:
        raise InvalidDonationError("Need does not belong to this student.")

    platform_fee, net_amount = calculate_platform_fee(amount)

    donation = Donation.objects.create(
        student=student,
        student_name=student.full_name,
        need=need,
        donor=donor,
        donor_name=_resolve_donor_name(donor, donor_name, is_anonymous),
        donor_email=donor_email or (donor.email if donor else ''),
        is_anonymous=is_anonymous,
        amount=amount,
        currency=currency.upper(),
        platform_fee=platform_fee,
        net_amount=net_amount,
        message=message,
        **extra
    )

    logger.info(
        'donation_created',
        donation_id=str(donation.id),
        student_id=str(student.id),
        amount=str(donation.amount),
        currency=donation.currency,
        type=donation.type,
    )
    return donation


@transaction.atomic
def complete_donation(
    *,
    donation_id: UUID,
    stripe_charge_id: str = '',
    payment_method: str = '',
) -> Donation:
    """
    Mark a donation completed and credit every running total.

    In one transaction this:
    1. Marks the donation completed with completed_at
    2. Adds the amount to the student's total_raised and refreshes
       is_fully_funded
    3. Adds the amount to the need's amount_raised (fulfilling it when met)
    4. Updates the donor's total_donated, donation_count and
       students_supported

    Completing an already completed donation changes nothing.

    Raises:
        DonationNotFoundError: If the donation does not exist
        InvalidDonationError: If the donation was refunded
    """
    try:
        donation = Donation.objects.select_for_update().get(id=donation_id)
    except Donation.DoesNotExist:
        raise DonationNotFoundError(f"Donation with ID {donation_id} not found.")

    if donation.status == DonationStatus.COMPLETED:
        logger.info('donation_already_completed', donation_id=str(donation.id))
        return donation

    if donation.status == DonationStatus.REFUNDED:
        raise InvalidDonationError("A refunded donation cannot be completed.")

    donation.status = DonationStatus.COMPLETED
    donation.completed_at = timezone.now()
    update_fields = ['status', 'completed_at']
    if stripe_charge_id:
        donation.stripe_charge_id = stripe_charge_id
        update_fields.append('stripe_charge_id')
    if payment_method:
        donation.payment_method = payment_method
        update_fields.append('payment_method')
    donation.save(update_fields=update_fields)

    student = Student.objects.select_for_update().get(id=donation.student_id)
    student.total_raised = F('total_raised') + donation.amount
    student.save(update_fields=['total_raised', 'updated_at'])
    student.refresh_from_db(fields=['total_raised', 'total_needed'])
    student.refresh_funding_status()
    student.save(update_fields=['is_fully_funded'])

    if donation.need_id:
        need = StudentNeed.objects.select_for_update().get(id=donation.need_id)
        need.amount_raised = F('amount_raised') + donation.amount
        need.save(update_fields=['amount_raised', 'updated_at'])
        need.refresh_from_db(fields=['amount_raised'])
        if need.status == NeedStatus.ACTIVE and need.amount_raised >= need.amount_needed:
            need.status = NeedStatus.FULFILLED
            need.save(update_fields=['status'])

    if donation.donor_id:
        Donor.objects.filter(id=donation.donor_id).update(
            total_donated=F('total_donated') + donation.amount,
            donation_count=F('donation_count') + 1,
        )
        donation.donor.students_supported.add(student)

    logger.info(
        'donation_completed',
        donation_id=str(donation.id),
        student_id=str(student.id),
        amount=str(donation.amount),
        currency=donation.currency,
        student_total_raised=str(student.total_raised),
        is_fully_funded=student.is_fully_funded,
    )
    return donation


@transaction.atomic
def fail_donation(*, donation_id: UUID, reason: str = '') -> Donation:
    """
    Mark a pending donation failed.

    Raises:
        DonationNotFoundError: If the donation does not exist
    """
    try:
        donation = Donation.objects.select_for_update().get(id=donation_id)
    except Donation.DoesNotExist:
        raise DonationNotFoundError(f"Donation with ID {donation_id} not found.")

    if donation.status != DonationStatus.PENDING:
        logger.warning(
            'donation_fail_ignored',
            donation_id=str(donation.id),
            status=donation.status,
        )
        return donation

    donation.status = DonationStatus.FAILED
    donation.save(update_fields=['status'])

    logger.warning('donation_failed', donation_id=str(donation.id), reason=reason)
    return donation


def get_donor_donations(donor_id: UUID) -> QuerySet[Donation]:
    """Completed donations by a donor, newest first."""
    return Donation.objects.filter(
        donor_id=donor_id,
        status=DonationStatus.COMPLETED,
    ).select_related('student').order_by('-created_at')


def get_student_donations(student_id: UUID) -> QuerySet[Donation]:
    """Completed donations to a student, newest first."""
    return Donation.objects.filter(
        student_id=student_id,
        status=DonationStatus.COMPLETED,
    ).order_by('-created_at')


@transaction.atomic
def record_offline_donation(
    *,
    student: Student,
    amount: Decimal,
    currency: str,
    offline_method: str,
    recorded_by: Donor,
    offline_reference: str = '',
    proof_document_url: str = '',
    **data
) -> Donation:
    """
    Record a cash, check or transfer gift and complete it immediately.

    Raises:
        InvalidDonationError: If the offline method or donation data is invalid
    """
    if offline_method not in OfflineMethod.values:
        raise InvalidDonationError(f"Unknown offline method '{offline_method}'.")

    donation = create_donation(
        student=student,
        amount=amount,
        currency=currency,
        type=DonationType.OFFLINE,
        offline_method=offline_method,
        offline_reference=offline_reference,
        proof_document_url=proof_document_url,
        recorded_by=recorded_by,
        **data
    )

    logger.info(
        'offline_donation_recorded',
        donation_id=str(donation.id),
        recorded_by=str(recorded_by.id),
        offline_method=offline_method,
    )
    return complete_donation(donation_id=donation.id)
