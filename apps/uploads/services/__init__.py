"""Services for file uploads."""

from .exceptions import (
    UploadsServiceError,
    InvalidUploadError,
)
from .media_storage import (
    upload_student_photo,
    upload_student_document,
    upload_donation_proof,
    upload_campaign_image,
    delete_file,
    get_student_photos,
)

__all__ = [
    # Exceptions
    'UploadsServiceError',
    'InvalidUploadError',
    # Storage
    'upload_student_photo',
    'upload_student_document',
    'upload_donation_proof',
    'upload_campaign_image',
    'delete_file',
    'get_student_photos',
]
