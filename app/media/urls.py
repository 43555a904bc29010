"""
URL configuration for media app.

Media:
    GET /                      - List stored images
    POST /                     - Upload images (field "images")
    POST /single/              - Upload one image (field "image")
    DELETE /{filename}/        - Delete a stored image

Public delivery (GET /uploads/{filename}) is routed in config.urls.
"""

from django.urls import path, re_path

from media.views import MediaDeleteView, MediaListCreateView, MediaSingleUploadView

app_name = "media"

urlpatterns = [
    path("", MediaListCreateView.as_view(), name="list"),
    path("single/", MediaSingleUploadView.as_view(), name="single-upload"),
    # Any name reaches the view so unsafe names are rejected as 400, not routed as 404
    re_path(r"^(?P<filename>.+?)/?$", MediaDeleteView.as_view(), name="delete"),
]
