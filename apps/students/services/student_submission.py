"""Student case submission and review workflow."""

import structlog
from django.db import transaction
from django.utils import timezone
from typing import Optional
from uuid import UUID

from apps.pages.formatting import generate_slug
from ..models import Student, StudentStatus
from .exceptions import StudentNotFoundError, InvalidReviewError


logger = structlog.get_logger(__name__)

REVIEW_STATUSES = {
    StudentStatus.APPROVED,
    StudentStatus.REJECTED,
    StudentStatus.ARCHIVED,
}


def _unique_slug(first_name: str, last_name: str) -> str:
    base = generate_slug(f'{first_name} {last_name}') or 'student'
    slug = base
    suffix = 2
    while Student.objects.filter(slug=slug).exists():
        slug = f'{base}-{suffix}'
        suffix += 1
    return slug


@transaction.atomic
def submit_student(**data) -> Student:
    """
    Create a student case awaiting review.

    Status, funding totals and the slug are always set here. Any values
    for them in ``data`` are ignored.

    Returns:
        The created Student in pending status
    """
    for field in ('status', 'total_raised', 'is_fully_funded', 'slug',
                  'reviewed_at', 'reviewed_by', 'rejection_reason'):
        data.pop(field, None)

    student = Student.objects.create(
        **data,
        status=StudentStatus.PENDING,
        total_raised=0,
        is_fully_funded=False,
        slug=_unique_slug(data.get('first_name', ''), data.get('last_name', '')),
    )

    logger.info(
        'student_submitted',
        student_id=str(student.id),
        slug=student.slug,
        submitter_email=student.submitter_email,
    )
    return student


@transaction.atomic
def review_student(
    *,
    student_id: UUID,
    status: str,
    reviewed_by,
    rejection_reason: Optional[str] = None,
) -> Student:
    """
    Record a review decision on a student case.

    Raises:
        StudentNotFoundError: If the student does not exist
        InvalidReviewError: If status is not a review outcome
    """
    if status not in REVIEW_STATUSES:
        raise InvalidReviewError(f"Cannot set review status to '{status}'.")

    try:
        student = Student.objects.select_for_update().get(id=student_id)
    except Student.DoesNotExist:
        raise StudentNotFoundError(f"Student with ID {student_id} not found.")

    student.status = status
    student.reviewed_by = reviewed_by
    student.reviewed_at = timezone.now()
    update_fields = ['status', 'reviewed_by', 'reviewed_at', 'updated_at']

    if rejection_reason:
        student.rejection_reason = rejection_reason
        update_fields.append('rejection_reason')

    student.save(update_fields=update_fields)

    logger.info(
        'student_reviewed',
        student_id=str(student.id),
        status=status,
        reviewed_by=str(reviewed_by.id) if reviewed_by else None,
    )
    return student
