"""Scan Domain Services."""

from apps.scan.domain.services import waste_taxonomy

__all__ = ["waste_taxonomy"]
