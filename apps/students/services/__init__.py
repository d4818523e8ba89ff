"""Services for students business logic."""

from .exceptions import (
    StudentsServiceError,
    StudentNotFoundError,
    InvalidReviewError,
)
from .student_listing import (
    get_approved_students,
    search_students,
    get_featured_students,
    get_student_by_slug,
    get_student_by_id,
    get_pending_students,
)
from .student_submission import (
    submit_student,
    review_student,
)
from .student_needs import (
    get_student_needs,
    add_student_need,
)
from .impact_updates import (
    get_student_updates,
    post_impact_update,
)

__all__ = [
    # Exceptions
    'StudentsServiceError',
    'StudentNotFoundError',
    'InvalidReviewError',
    # Listing
    'get_approved_students',
    'search_students',
    'get_featured_students',
    'get_student_by_slug',
    'get_student_by_id',
    'get_pending_students',
    # Submission & review
    'submit_student',
    'review_student',
    # Needs
    'get_student_needs',
    'add_student_need',
    # Impact updates
    'get_student_updates',
    'post_impact_update',
]
