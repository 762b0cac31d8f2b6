"""Facility Queries."""

from apps.scan.application.facility.queries.find_nearby_facilities import (
    FindNearbyFacilitiesQuery,
)

__all__ = ["FindNearbyFacilitiesQuery"]
