"""Google Cloud Vision HTTP 클라이언트.

Vision REST API의 라벨 검출 구현체.
- 라벨 검출: POST /v1/images:annotate (LABEL_DETECTION)
- 인증: ?key={API_KEY}
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import Any

import httpx

from apps.scan.application.classify.ports import VisionLabelerPort
from apps.scan.domain.value_objects import DetectedLabel

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0
DEFAULT_MAX_RESULTS = 10


class VisionApiError(Exception):
    """Vision API가 오류를 반환함."""


class GoogleVisionHttpClient(VisionLabelerPort):
    """Google Vision 라벨 검출 HTTP 클라이언트."""

    BASE_URL = "https://vision.googleapis.com/v1"

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        max_results: int = DEFAULT_MAX_RESULTS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._max_results = max_results
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

    async def detect_labels(self, image: bytes) -> list[DetectedLabel]:
        """이미지 라벨 검출."""
        client = await self._get_client()

        payload = {
            "requests": [
                {
                    "image": {"content": base64.b64encode(image).decode("ascii")},
                    "features": [{"type": "LABEL_DETECTION", "maxResults": self._max_results}],
                }
            ]
        }

        try:
            response = await client.post(
                "/images:annotate",
                params={"key": self._api_key},
                json=payload,
            )
            response.raise_for_status()
            return self._parse_response(response.json())
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Vision API HTTP error",
                extra={"status_code": e.response.status_code},
            )
            raise
        except httpx.TimeoutException:
            logger.warning("Vision API timeout")
            raise

    def _parse_response(self, data: dict[str, Any]) -> list[DetectedLabel]:
        responses = data.get("responses") or [{}]
        first = responses[0]

        error = first.get("error")
        if error:
            raise VisionApiError(error.get("message", "Vision API error"))

        return [
            DetectedLabel(text=annotation.get("description", ""), confidence=annotation.get("score"))
            for annotation in first.get("labelAnnotations", [])
            if annotation.get("description")
        ]

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
