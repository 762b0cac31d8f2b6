"""Places API Port.

주변 장소 검색을 위한 포트 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from apps.scan.domain.value_objects import GeoPoint


@dataclass(frozen=True)
class PlaceDTO:
    """Places 검색 결과 DTO."""

    name: str
    vicinity: str
    rating: float | None = None
    place_id: str | None = None


class PlacesClientPort(ABC):
    """Places API 포트."""

    @abstractmethod
    async def search_nearby(
        self,
        keyword: str,
        location: GeoPoint,
        radius: int = 5000,
    ) -> list[PlaceDTO]:
        """키워드로 주변 장소 검색 (외부 API 순위 그대로).

        Raises:
            FacilityLookupError: 네트워크/쿼터/응답 형식 오류
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
