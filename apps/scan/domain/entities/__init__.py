"""Scan Domain Entities."""

from apps.scan.domain.entities.classification_event import ClassificationEvent
from apps.scan.domain.entities.user_progress import ECO_WARRIOR_BADGE, UserProgress

__all__ = ["ClassificationEvent", "ECO_WARRIOR_BADGE", "UserProgress"]
