"""Read-side queries for approved student listings."""

from django.db.models import Q, QuerySet, Value
from django.db.models.functions import Concat
from typing import Optional
from uuid import UUID

from ..models import Student, StudentStatus


def get_approved_students(
    *,
    category: Optional[str] = None,
    school: Optional[str] = None,
    featured: Optional[bool] = None,
) -> QuerySet[Student]:
    """
    Approved students, highest priority first then newest.

    Args:
        category: Only students with an active need in this category
        school: Case-insensitive match on school name
        featured: Only featured students when True

    Returns:
        QuerySet of Student ordered by (-priority, -created_at)
    """
    queryset = Student.objects.filter(status=StudentStatus.APPROVED)

    if featured:
        queryset = queryset.filter(featured=True)

    if category:
        queryset = queryset.filter(
            needs__category=category,
            needs__status='active',
        ).distinct()

    if school:
        queryset = queryset.filter(school_name__icontains=school)

    return queryset.order_by('-priority', '-created_at')


def search_students(queryset: QuerySet[Student], query: Optional[str]) -> QuerySet[Student]:
    """
    Narrow a student queryset by a free-text query.

    Matches the query case-insensitively against the full name or the
    school name. A blank query returns the queryset unchanged.
    """
    query = (query or '').strip()
    if not query:
        return queryset

    return queryset.annotate(
        search_full_name=Concat('first_name', Value(' '), 'last_name')
    ).filter(
        Q(search_full_name__icontains=query) |
        Q(school_name__icontains=query)
    )


def get_featured_students(*, count: int = 6) -> list[Student]:
    queryset = Student.objects.filter(
        status=StudentStatus.APPROVED,
        featured=True,
    ).order_by('-priority', '-created_at')
    return list(queryset[:count])


def get_student_by_slug(slug: str) -> Optional[Student]:
    """Approved student by slug, or None."""
    return Student.objects.filter(
        slug=slug,
        status=StudentStatus.APPROVED,
    ).first()


def get_student_by_id(student_id: UUID) -> Optional[Student]:
    return Student.objects.filter(id=student_id).first()


def get_pending_students() -> QuerySet[Student]:
    """Submissions awaiting review, oldest first."""
    return Student.objects.filter(
        status=StudentStatus.PENDING
    ).order_by('submitted_at')
