"""
Service layer unit tests for uploads app.

Tests cover:
- Storage paths per upload kind
- Primary photo replacement
- Listing and deleting stored files
"""

import pytest
from unittest.mock import patch
from uuid import uuid4
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.uploads.services import (
    upload_student_photo,
    upload_student_document,
    upload_donation_proof,
    upload_campaign_image,
    delete_file,
    get_student_photos,
)
from apps.uploads.services.exceptions import InvalidUploadError


TIMESTAMP = 'apps.uploads.services.media_storage._timestamp_ms'


class TestStudentPhotos:

    def test_primary_photo_path(self, media_root, make_image):
        student_id = uuid4()

        url = upload_student_photo(student_id, make_image(), is_primary=True)

        assert url == f'https://testserver.example/media/students/{student_id}/photos/primary.jpg'
        assert (media_root / 'students' / str(student_id) / 'photos' / 'primary.jpg').exists()

    def test_primary_photo_replaced(self, media_root, make_image):
        student_id = uuid4()

        first = upload_student_photo(student_id, make_image(), is_primary=True)
        second = upload_student_photo(student_id, make_image(), is_primary=True)

        assert first == second
        assert len(list((media_root / 'students' / str(student_id) / 'photos').iterdir())) == 1

    def test_gallery_photo_keeps_extension(self, make_image):
        student_id = uuid4()

        with patch(TIMESTAMP, return_value=1700000000000):
            url = upload_student_photo(student_id, make_image('Class.JPEG', 'JPEG'))

        assert url.endswith(f'students/{student_id}/photos/gallery_1700000000000.jpeg')

    def test_list_photos(self, make_image):
        student_id = uuid4()
        upload_student_photo(student_id, make_image(), is_primary=True)
        with patch(TIMESTAMP, return_value=1):
            upload_student_photo(student_id, make_image())

        photos = get_student_photos(student_id)

        assert [url.rsplit('/', 1)[-1] for url in photos] == ['gallery_1.png', 'primary.jpg']

    def test_list_photos_missing_folder(self):
        assert get_student_photos(uuid4()) == []


class TestOtherUploads:

    def test_document_type_in_name(self, pdf_file):
        student_id = uuid4()

        with patch(TIMESTAMP, return_value=42):
            url = upload_student_document(student_id, pdf_file, 'Report Card')

        assert url.endswith(f'students/{student_id}/documents/report_card_42.pdf')

    def test_donation_proof(self, pdf_file):
        donation_id = uuid4()

        with patch(TIMESTAMP, return_value=7):
            url = upload_donation_proof(donation_id, pdf_file)

        assert url.endswith(f'donations/{donation_id}/proofs/proof_7.pdf')

    def test_campaign_cover(self, make_image):
        campaign_id = uuid4()

        with patch(TIMESTAMP, return_value=9):
            url = upload_campaign_image(campaign_id, make_image())

        assert url.endswith(f'campaigns/{campaign_id}/cover_9.png')

    def test_empty_file_rejected(self):
        empty = SimpleUploadedFile('empty.png', b'', content_type='image/png')

        with pytest.raises(InvalidUploadError):
            upload_donation_proof(uuid4(), empty)


class TestDeleteFile:

    def test_delete(self, media_root, pdf_file):
        donation_id = uuid4()
        with patch(TIMESTAMP, return_value=1):
            upload_donation_proof(donation_id, pdf_file)
        path = f'donations/{donation_id}/proofs/proof_1.pdf'

        delete_file(path)

        assert not (media_root / path).exists()

    def test_delete_missing_file_is_quiet(self):
        delete_file('students/nobody/photos/primary.jpg')
