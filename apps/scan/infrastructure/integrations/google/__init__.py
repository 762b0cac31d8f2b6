"""Google API integrations."""

from apps.scan.infrastructure.integrations.google.places_client import GooglePlacesHttpClient
from apps.scan.infrastructure.integrations.google.vision_client import (
    GoogleVisionHttpClient,
    VisionApiError,
)

__all__ = ["GooglePlacesHttpClient", "GoogleVisionHttpClient", "VisionApiError"]
