from django.core.exceptions import SuspiciousFileOperation
from rest_framework import status
from rest_framework.parsers import MultiPartParser, FormParser, JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsPlatformAdmin
from apps.campaigns.models import Campaign
from apps.donations.models import Donation
from apps.students.models import Student
from .serializers import (
    StudentPhotoUploadSerializer,
    StudentDocumentUploadSerializer,
    FileUploadSerializer,
    FileDeleteSerializer,
    UploadResponseSerializer,
)
from .services import (
    upload_student_photo,
    upload_student_document,
    upload_donation_proof,
    upload_campaign_image,
    delete_file,
    get_student_photos,
    InvalidUploadError,
)


def _not_found(label):
    return Response({'error': f'{label} not found'}, status=status.HTTP_404_NOT_FOUND)


class AdminUploadView(APIView):
    """Base for admin-only multipart upload endpoints."""
    permission_classes = [IsPlatformAdmin]
    parser_classes = [MultiPartParser, FormParser]


class StudentPhotoView(AdminUploadView):
    """
    GET  /api/uploads/students/{id}/photos/  - List photo URLs
    POST /api/uploads/students/{id}/photos/  - Upload a photo (is_primary replaces the main photo)
    """

    @extend_schema(responses={200: UploadResponseSerializer(many=True)}, tags=['uploads'])
    def get(self, request, pk):
        return Response([{'url': url} for url in get_student_photos(pk)])

    @extend_schema(request=StudentPhotoUploadSerializer, responses={201: UploadResponseSerializer}, tags=['uploads'])
    def post(self, request, pk):
        if not Student.objects.filter(id=pk).exists():
            return _not_found('Student')

        serializer = StudentPhotoUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        is_primary = serializer.validated_data['is_primary']

        try:
            url = upload_student_photo(pk, serializer.validated_data['file'], is_primary=is_primary)
        except InvalidUploadError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        if is_primary:
            Student.objects.filter(id=pk).update(photo_url=url)

        return Response({'url': url}, status=status.HTTP_201_CREATED)


class StudentDocumentView(AdminUploadView):

    @extend_schema(request=StudentDocumentUploadSerializer, responses={201: UploadResponseSerializer}, tags=['uploads'])
    def post(self, request, pk):
        if not Student.objects.filter(id=pk).exists():
            return _not_found('Student')

        serializer = StudentDocumentUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            url = upload_student_document(
                pk,
                serializer.validated_data['file'],
                serializer.validated_data['document_type'],
            )
        except InvalidUploadError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'url': url}, status=status.HTTP_201_CREATED)


class DonationProofView(AdminUploadView):
    """Upload proof for an offline donation and attach it to the record."""

    @extend_schema(request=FileUploadSerializer, responses={201: UploadResponseSerializer}, tags=['uploads'])
    def post(self, request, pk):
        if not Donation.objects.filter(id=pk).exists():
            return _not_found('Donation')

        serializer = FileUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            url = upload_donation_proof(pk, serializer.validated_data['file'])
        except InvalidUploadError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        Donation.objects.filter(id=pk).update(proof_document_url=url)
        return Response({'url': url}, status=status.HTTP_201_CREATED)


class CampaignCoverView(AdminUploadView):

    @extend_schema(request=FileUploadSerializer, responses={201: UploadResponseSerializer}, tags=['uploads'])
    def post(self, request, pk):
        if not Campaign.objects.filter(id=pk).exists():
            return _not_found('Campaign')

        serializer = FileUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            url = upload_campaign_image(pk, serializer.validated_data['file'])
        except InvalidUploadError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        Campaign.objects.filter(id=pk).update(cover_image_url=url)
        return Response({'url': url}, status=status.HTTP_201_CREATED)


class FileDeleteView(APIView):
    """DELETE /api/uploads/files/ with {"path": "..."}"""
    permission_classes = [IsPlatformAdmin]
    parser_classes = [JSONParser]

    @extend_schema(request=FileDeleteSerializer, responses={204: None}, tags=['uploads'])
    def delete(self, request):
        serializer = FileDeleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            delete_file(serializer.validated_data['path'])
        except SuspiciousFileOperation:
            return Response({'error': 'Invalid path'}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)
