"""HTTP Schemas."""

from apps.scan.presentation.http.schemas.catalog import WasteCategoryItem
from apps.scan.presentation.http.schemas.classify import (
    ClassifyWasteBody,
    ClassifyWasteResponse,
    LocationItem,
    UserLocation,
)
from apps.scan.presentation.http.schemas.progress import (
    RecordProgressBody,
    RecordProgressResponse,
)

__all__ = [
    "ClassifyWasteBody",
    "ClassifyWasteResponse",
    "LocationItem",
    "RecordProgressBody",
    "RecordProgressResponse",
    "UserLocation",
    "WasteCategoryItem",
]
