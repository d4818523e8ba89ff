"""Impact updates posted about students."""

import structlog
from django.db.models import QuerySet
from uuid import UUID

from ..models import Student, ImpactUpdate
from .exceptions import StudentNotFoundError


logger = structlog.get_logger(__name__)


def get_student_updates(student_id: UUID, *, public_only: bool = True) -> QuerySet[ImpactUpdate]:
    queryset = ImpactUpdate.objects.filter(student_id=student_id)
    if public_only:
        queryset = queryset.filter(is_public=True)
    return queryset.order_by('-created_at')


def post_impact_update(*, student_id: UUID, created_by=None, **data) -> ImpactUpdate:
    """
    Publish an update on a student's progress.

    Raises:
        StudentNotFoundError: If the student does not exist
    """
    if not Student.objects.filter(id=student_id).exists():
        raise StudentNotFoundError(f"Student with ID {student_id} not found.")

    update = ImpactUpdate.objects.create(student_id=student_id, created_by=created_by, **data)

    logger.info(
        'impact_update_posted',
        student_id=str(student_id),
        update_id=str(update.id),
        type=update.type,
        is_public=update.is_public,
    )
    return update
