from rest_framework import serializers


class StudentPhotoUploadSerializer(serializers.Serializer):
    file = serializers.ImageField()
    is_primary = serializers.BooleanField(default=False)


class StudentDocumentUploadSerializer(serializers.Serializer):
    file = serializers.FileField()
    document_type = serializers.CharField(max_length=50)


class FileUploadSerializer(serializers.Serializer):
    file = serializers.FileField()


class FileDeleteSerializer(serializers.Serializer):
    path = serializers.CharField(max_length=500)


class UploadResponseSerializer(serializers.Serializer):
    url = serializers.URLField()
