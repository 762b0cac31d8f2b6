"""Scan Domain Value Objects."""

from apps.scan.domain.value_objects.classification_result import ClassificationResult
from apps.scan.domain.value_objects.detected_label import DetectedLabel
from apps.scan.domain.value_objects.facility import UNRATED, Facility
from apps.scan.domain.value_objects.geo_point import GeoPoint

__all__ = ["ClassificationResult", "DetectedLabel", "Facility", "GeoPoint", "UNRATED"]
