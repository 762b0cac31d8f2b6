"""Facility Ports."""

from apps.scan.application.facility.ports.places_client import PlaceDTO, PlacesClientPort

__all__ = ["PlaceDTO", "PlacesClientPort"]
