"""
Serializers for media API request and response bodies.

Uploads are parsed and validated by MediaUploadService, not by these
serializers; the request serializers exist to describe the multipart
bodies in the OpenAPI schema.
"""

from rest_framework import serializers


class AssetSerializer(serializers.Serializer):
    """A stored asset: generated filename and public URL."""

    filename = serializers.CharField(read_only=True)
    url = serializers.CharField(read_only=True)


class AssetListResponseSerializer(serializers.Serializer):
    """Success envelope wrapping a list of assets."""

    status = serializers.CharField(default="success")
    data = AssetSerializer(many=True)


class MediaUploadSerializer(serializers.Serializer):
    """Multipart body for batch uploads (up to the configured file count)."""

    images = serializers.ListField(
        child=serializers.FileField(),
        help_text="Image files; repeat the field once per file",
    )


class MediaSingleUploadSerializer(serializers.Serializer):
    """Multipart body for a single upload."""

    image = serializers.FileField(help_text="Image file")


class MessageResponseSerializer(serializers.Serializer):
    status = serializers.CharField()
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    status = serializers.CharField(default="error")
    message = serializers.CharField()
    error_code = serializers.CharField(required=False)
