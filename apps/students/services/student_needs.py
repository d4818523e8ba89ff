"""Funding needs attached to a student."""

import structlog
from django.db import transaction
from django.db.models import Case, IntegerField, QuerySet, Value, When
from uuid import UUID

from ..models import Student, StudentNeed, NEED_PRIORITY_RANK
from .exceptions import StudentNotFoundError


logger = structlog.get_logger(__name__)


def get_student_needs(student_id: UUID) -> QuerySet[StudentNeed]:
    """Needs for a student, urgent first then high, medium, low."""
    priority_rank = Case(
        *[When(priority=priority, then=Value(rank)) for priority, rank in NEED_PRIORITY_RANK.items()],
        default=Value(0),
        output_field=IntegerField(),
    )
    return StudentNeed.objects.filter(
        student_id=student_id
    ).annotate(
        priority_rank=priority_rank
    ).order_by('-priority_rank', 'created_at')


@transaction.atomic
def add_student_need(*, student_id: UUID, **data) -> StudentNeed:
    """
    Attach a new need to a student. amount_raised always starts at zero.

    Raises:
        StudentNotFoundError: If the student does not exist
    """
    if not Student.objects.filter(id=student_id).exists():
        raise StudentNotFoundError(f"Student with ID {student_id} not found.")

    data.pop('amount_raised', None)
    need = StudentNeed.objects.create(student_id=student_id, amount_raised=0, **data)

    logger.info(
        'student_need_added',
        student_id=str(student_id),
        need_id=str(need.id),
        category=need.category,
        amount_needed=str(need.amount_needed),
    )
    return need
