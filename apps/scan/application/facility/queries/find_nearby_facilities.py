"""Find Nearby Facilities Query.

카테고리에 맞는 주변 처리 시설을 조회합니다 (best-effort).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.scan.domain.enums import WasteCategory
from apps.scan.domain.value_objects import UNRATED, Facility, GeoPoint

if TYPE_CHECKING:
    from apps.scan.application.facility.ports import PlaceDTO, PlacesClientPort

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_M = 5000
MAX_FACILITIES = 3

SEARCH_KEYWORDS: dict[WasteCategory, str] = {
    WasteCategory.RECYCLABLE: "recycling center",
    WasteCategory.HAZARDOUS: "hazardous waste disposal",
    WasteCategory.DONATABLE: "thrift store OR donation center",
    WasteCategory.ORGANIC: "compost facility",
}
DEFAULT_KEYWORD = "waste disposal"


class FindNearbyFacilitiesQuery:
    """주변 시설 조회 Query.

    Workflow:
        1. 카테고리 → 검색 키워드
        2. Places API 1회 호출 (반경 radius)
        3. 상위 limit개를 순서 그대로 Facility로 투영

    어떤 실패도 호출자에게 전파하지 않고 빈 튜플을 반환합니다.
    Places 클라이언트가 없으면 (API key 미설정) 항상 빈 튜플입니다.
    """

    def __init__(
        self,
        places_client: "PlacesClientPort | None",
        radius: int = DEFAULT_RADIUS_M,
        limit: int = MAX_FACILITIES,
    ) -> None:
        self._places = places_client
        self._radius = radius
        self._limit = limit

    @staticmethod
    def keyword_for(category: WasteCategory) -> str:
        return SEARCH_KEYWORDS.get(category, DEFAULT_KEYWORD)

    async def execute(self, category: WasteCategory, location: GeoPoint) -> tuple[Facility, ...]:
        if self._places is None:
            return ()

        keyword = self.keyword_for(category)
        try:
            places = await self._places.search_nearby(
                keyword=keyword,
                location=location,
                radius=self._radius,
            )
            facilities = tuple(self._to_facility(place) for place in places[: self._limit])
        except Exception as e:
            logger.error(
                "Facility lookup failed",
                extra={
                    "stage": "facility_lookup",
                    "category": category.value,
                    "keyword": keyword,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            return ()

        logger.info(
            "Facility lookup completed",
            extra={"category": category.value, "results_count": len(facilities)},
        )
        return facilities

    @staticmethod
    def _to_facility(place: "PlaceDTO") -> Facility:
        return Facility(
            name=place.name,
            address=place.vicinity,
            rating=place.rating if place.rating is not None else UNRATED,
        )
