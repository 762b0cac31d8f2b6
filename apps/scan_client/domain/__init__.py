"""Scan client domain."""

from apps.scan_client.domain.models import (
    ClassificationView,
    LocationView,
    SelectedImage,
    Session,
    UploadState,
)

__all__ = ["ClassificationView", "LocationView", "SelectedImage", "Session", "UploadState"]
