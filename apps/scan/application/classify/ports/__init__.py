"""Classify Ports."""

from apps.scan.application.classify.ports.vision_labeler import VisionLabelerPort

__all__ = ["VisionLabelerPort"]
