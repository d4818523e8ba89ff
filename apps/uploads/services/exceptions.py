"""Domain-specific exceptions for uploads services."""


class UploadsServiceError(Exception):
    """Base exception for uploads services."""
    pass


class InvalidUploadError(UploadsServiceError):
    """Raised when an uploaded file is empty or has no usable name."""
    pass
