"""
API views for media uploads, listing, deletion and public delivery.

Provides:
- MediaListCreateView: List stored assets (GET) and upload images (POST)
- MediaSingleUploadView: Upload exactly one image
- MediaDeleteView: Delete a stored asset by filename
- PublicAssetView: Serve a stored asset to anyone

Management endpoints require a JWT for a user holding the admin role.
Failures are raised from ServiceResult and rendered by
core.exception_handler as {"status": "error", "message": ...}.
"""

from __future__ import annotations

from django.core.exceptions import TooManyFilesSent
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.permissions import IsAdminRole
from media.conf import get_media_settings
from media.serializers import (
    AssetListResponseSerializer,
    ErrorResponseSerializer,
    MediaSingleUploadSerializer,
    MediaUploadSerializer,
    MessageResponseSerializer,
)
from media.services import MediaDirectoryService, MediaUploadService, PublicAssetDelivery

MANAGEMENT_ERROR_RESPONSES = {
    401: OpenApiResponse(ErrorResponseSerializer, description="Authentication required"),
    403: OpenApiResponse(ErrorResponseSerializer, description="Admin role required"),
}


def _serialize_assets(assets):
    return [asset.to_dict() for asset in assets]


def _upload_response(request, field_name: str, max_files: int | None = None) -> Response:
    """Run the upload pipeline on a request and render the 201 envelope."""
    service = MediaUploadService(get_media_settings())
    try:
        files = request.FILES
    except TooManyFilesSent:
        # Parser refused the body for exceeding DATA_UPLOAD_MAX_NUMBER_FILES
        result = service.too_many_files(max_files)
    else:
        result = service.upload_from_multipart(files, field_name=field_name, max_files=max_files)
    result.raise_for_error()
    return Response(
        result.map(_serialize_assets).to_response(),
        status=status.HTTP_201_CREATED,
    )


class MediaListCreateView(APIView):
    """
    List and upload media.

    GET /api/media/
        List image files in the uploads directory.

    POST /api/media/
        Upload up to the configured number of images under the "images" field.

    Authentication:
        Requires valid JWT token for a user with the admin role.

    Response:
        200 OK: Listing
        201 Created: Files stored
        400 Bad Request: Too many files, not an image, or file too large
        401 Unauthorized: Not authenticated
        403 Forbidden: Not an admin
    """

    permission_classes = [IsAuthenticated, IsAdminRole]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="list_media",
        summary="List media",
        description="List image files currently stored, with their public URLs.",
        responses={
            200: AssetListResponseSerializer,
            500: OpenApiResponse(ErrorResponseSerializer, description="Failed to list media"),
            **MANAGEMENT_ERROR_RESPONSES,
        },
        tags=["Media"],
    )
    def get(self, request):
        result = MediaDirectoryService(get_media_settings()).list_assets()
        result.raise_for_error()
        return Response(result.map(_serialize_assets).to_response())

    @extend_schema(
        operation_id="upload_media",
        summary="Upload media",
        description=(
            "Upload one or more images as multipart/form-data under the 'images' field. "
            "The batch is all-or-nothing: if any file is rejected, nothing is stored."
        ),
        request={"multipart/form-data": MediaUploadSerializer},
        responses={
            201: OpenApiResponse(AssetListResponseSerializer, description="Files stored"),
            400: OpenApiResponse(ErrorResponseSerializer, description="Upload rejected"),
            500: OpenApiResponse(ErrorResponseSerializer, description="Failed to upload media"),
            **MANAGEMENT_ERROR_RESPONSES,
        },
        tags=["Media"],
    )
    def post(self, request):
        return _upload_response(request, get_media_settings().upload_field)


class MediaSingleUploadView(APIView):
    """
    Upload a single image.

    POST /api/media/single/
        Upload one image under the "image" field.
    """

    permission_classes = [IsAuthenticated, IsAdminRole]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="upload_single_media",
        summary="Upload single image",
        request={"multipart/form-data": MediaSingleUploadSerializer},
        responses={
            201: OpenApiResponse(AssetListResponseSerializer, description="File stored"),
            400: OpenApiResponse(ErrorResponseSerializer, description="Upload rejected"),
            500: OpenApiResponse(ErrorResponseSerializer, description="Failed to upload media"),
            **MANAGEMENT_ERROR_RESPONSES,
        },
        tags=["Media"],
    )
    def post(self, request):
        return _upload_response(request, get_media_settings().single_upload_field, max_files=1)


class MediaDeleteView(APIView):
    """
    Delete a stored asset.

    DELETE /api/media/{filename}/

    Response:
        200 OK: {"status": "success", "message": "File deleted"}
        400 Bad Request: Invalid filename
        404 Not Found: No such file
    """

    permission_classes = [IsAuthenticated, IsAdminRole]

    @extend_schema(
        operation_id="delete_media",
        summary="Delete media",
        parameters=[
            OpenApiParameter(
                name="filename",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Stored filename as returned by upload or listing",
            ),
        ],
        responses={
            200: MessageResponseSerializer,
            400: OpenApiResponse(ErrorResponseSerializer, description="Invalid filename"),
            404: OpenApiResponse(ErrorResponseSerializer, description="File not found"),
            500: OpenApiResponse(ErrorResponseSerializer, description="Failed to delete media"),
            **MANAGEMENT_ERROR_RESPONSES,
        },
        tags=["Media"],
    )
    def delete(self, request, filename):
        result = MediaDirectoryService(get_media_settings()).delete_asset(filename)
        result.raise_for_error()
        return Response({"status": "success", "message": "File deleted"})


class PublicAssetView(APIView):
    """
    Serve a stored asset without authentication.

    GET /uploads/{filename}
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = []

    @extend_schema(
        operation_id="get_public_asset",
        summary="Fetch stored image",
        responses={
            (200, "image/*"): OpenApiTypes.BINARY,
            404: OpenApiResponse(ErrorResponseSerializer, description="File not found"),
        },
        tags=["Uploads"],
    )
    def get(self, request, filename):
        return PublicAssetDelivery(get_media_settings()).serve_file_response(filename)
