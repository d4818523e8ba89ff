"""Domain-specific exceptions for students services."""


class StudentsServiceError(Exception):
    """Base exception for students services."""
    pass


class StudentNotFoundError(StudentsServiceError):
    """Raised when student does not exist."""
    pass


class InvalidReviewError(StudentsServiceError):
    """Raised when a review decision is not allowed."""
    pass
