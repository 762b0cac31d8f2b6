"""GeoPoint Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """위경도 좌표.

    Attributes:
        lat: 위도 (-90 ~ 90)
        lng: 경도 (-180 ~ 180)
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90 <= self.lat <= 90:
            raise ValueError(f"latitude out of range: {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"longitude out of range: {self.lng}")

    def as_query_param(self) -> str:
        """Places API ``location`` 파라미터 형식 (``lat,lng``)."""
        return f"{self.lat},{self.lng}"
