"""Scan Domain Enums."""

from apps.scan.domain.enums.waste_category import WasteCategory

__all__ = ["WasteCategory"]
