"""Google Places HTTP 클라이언트.

Places API의 주변 검색 구현체.
- 주변 검색: GET /maps/api/place/nearbysearch/json
- 인증: key={API_KEY}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from apps.scan.application.common.exceptions import FacilityLookupError
from apps.scan.application.facility.ports import PlaceDTO, PlacesClientPort
from apps.scan.domain.value_objects import GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
OK_STATUSES = frozenset({"OK", "ZERO_RESULTS"})


class GooglePlacesHttpClient(PlacesClientPort):
    """Google Places HTTP 클라이언트."""

    BASE_URL = "https://maps.googleapis.com/maps/api/place"

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self.BASE_URL,
                        timeout=self._timeout,
                        transport=self._transport,
                    )
        return self._client

    async def search_nearby(
        self,
        keyword: str,
        location: GeoPoint,
        radius: int = 5000,
    ) -> list[PlaceDTO]:
        """키워드로 주변 장소 검색."""
        client = await self._get_client()

        params: dict[str, Any] = {
            "location": location.as_query_param(),
            "radius": radius,
            "keyword": keyword,
            "key": self._api_key,
        }

        try:
            response = await client.get("/nearbysearch/json", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise FacilityLookupError(f"Places request failed: {e}") from e
        except ValueError as e:
            raise FacilityLookupError("Places response is not valid JSON") from e

        return self._parse_response(data, keyword)

    def _parse_response(self, data: Any, keyword: str) -> list[PlaceDTO]:
        if not isinstance(data, dict):
            raise FacilityLookupError("Malformed Places response")

        status = data.get("status", "OK")
        if status not in OK_STATUSES:
            message = data.get("error_message") or status
            raise FacilityLookupError(f"Places API error: {message}")

        results = data.get("results")
        if not isinstance(results, list):
            raise FacilityLookupError("Malformed Places response")

        places = [
            PlaceDTO(
                name=place.get("name", ""),
                vicinity=place.get("vicinity", ""),
                rating=place.get("rating"),
                place_id=place.get("place_id"),
            )
            for place in results
            if isinstance(place, dict)
        ]
        logger.debug("Places search", extra={"keyword": keyword, "count": len(places)})
        return places

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
