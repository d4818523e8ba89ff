"""
File uploads for student photos, documents, donation proofs and campaign covers.

Files go through Django's default storage so the backend can be swapped
in settings. Layout:

    students/<id>/photos/primary.jpg
    students/<id>/photos/gallery_<ms>.<ext>
    students/<id>/documents/<type>_<ms>.<ext>
    donations/<id>/proofs/proof_<ms>.<ext>
    campaigns/<id>/cover_<ms>.<ext>
"""

import posixpath
import time

import structlog
from django.conf import settings
from django.core.files.storage import default_storage
from uuid import UUID

from apps.pages.formatting import generate_slug
from .exceptions import InvalidUploadError


logger = structlog.get_logger(__name__)

PRIMARY_PHOTO_NAME = 'primary.jpg'


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def _extension(uploaded_file) -> str:
    name = getattr(uploaded_file, 'name', '') or ''
    if not name:
        raise InvalidUploadError("Uploaded file has no name.")
    return name.split('.')[-1].lower()


def _public_url(path: str) -> str:
    url = default_storage.url(path)
    if url.startswith('/'):
        return settings.SITE_URL.rstrip('/') + url
    return url


def _store(path: str, uploaded_file, *, replace: bool = False) -> str:
    if not getattr(uploaded_file, 'size', 0):
        raise InvalidUploadError("Uploaded file is empty.")

    if replace and default_storage.exists(path):
        default_storage.delete(path)

    saved_path = default_storage.save(path, uploaded_file)
    logger.info('file_uploaded', path=saved_path, size=uploaded_file.size)
    return _public_url(saved_path)


def upload_student_photo(student_id: UUID, uploaded_file, *, is_primary: bool = False) -> str:
    """
    Store a student photo and return its public URL.

    The primary photo always lives at the same path and replaces the
    previous one. Gallery photos get a timestamped name.
    """
    if is_primary:
        filename = PRIMARY_PHOTO_NAME
    else:
        filename = f'gallery_{_timestamp_ms()}.{_extension(uploaded_file)}'
    path = f'students/{student_id}/photos/{filename}'
    return _store(path, uploaded_file, replace=is_primary)


def upload_student_document(student_id: UUID, uploaded_file, document_type: str) -> str:
    document_type = generate_slug(document_type).replace('-', '_') or 'document'
    filename = f'{document_type}_{_timestamp_ms()}.{_extension(uploaded_file)}'
    return _store(f'students/{student_id}/documents/{filename}', uploaded_file)


def upload_donation_proof(donation_id: UUID, uploaded_file) -> str:
    filename = f'proof_{_timestamp_ms()}.{_extension(uploaded_file)}'
    return _store(f'donations/{donation_id}/proofs/{filename}', uploaded_file)


def upload_campaign_image(campaign_id: UUID, uploaded_file) -> str:
    filename = f'cover_{_timestamp_ms()}.{_extension(uploaded_file)}'
    return _store(f'campaigns/{campaign_id}/{filename}', uploaded_file)


def delete_file(path: str) -> None:
    """Delete a stored file. Missing files are ignored by the storage backend."""
    default_storage.delete(path)
    logger.info('file_deleted', path=path)


def get_student_photos(student_id: UUID) -> list[str]:
    """
    Public URLs of every photo stored for a student.

    Returns an empty list when the photo folder cannot be listed.
    """
    folder = f'students/{student_id}/photos'
    try:
        _, files = default_storage.listdir(folder)
    except OSError as e:
        logger.info('student_photos_unavailable', student_id=str(student_id), error=str(e))
        return []
    return [_public_url(posixpath.join(folder, name)) for name in sorted(files)]
