"""Scan API HTTP 클라이언트."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from apps.scan_client.application.common import (
    ClassificationFailedError,
    ProgressUpdateError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class ScanApiHttpClient:
    """Scan 서버 HTTP 클라이언트 (ScanApi 구현체)."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        timeout=self._timeout,
                        transport=self._transport,
                    )
        return self._client

    async def classify_waste(
        self,
        *,
        access_token: str,
        image_base64: str,
        user_id: str,
        user_location: dict[str, float] | None = None,
    ) -> dict[str, Any]:
        """POST /api/classify-waste."""
        body: dict[str, Any] = {"imageBase64": image_base64, "userId": user_id}
        if user_location is not None:
            body["userLocation"] = user_location

        try:
            return await self._post("/api/classify-waste", access_token, body)
        except httpx.HTTPError as e:
            raise ClassificationFailedError(f"Network error: {e}") from e
        except _ServerError as e:
            raise ClassificationFailedError(e.message) from e

    async def record_progress(
        self,
        *,
        access_token: str,
        user_id: str,
        waste_type: str,
    ) -> dict[str, Any]:
        """POST /api/progress."""
        body = {"userId": user_id, "wasteType": waste_type}
        try:
            return await self._post("/api/progress", access_token, body)
        except httpx.HTTPError as e:
            raise ProgressUpdateError(f"Network error: {e}") from e
        except _ServerError as e:
            raise ProgressUpdateError(e.message) from e

    async def _post(self, path: str, access_token: str, body: dict[str, Any]) -> dict[str, Any]:
        client = await self._get_client()
        response = await client.post(
            path,
            json=body,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        if response.is_error:
            raise _ServerError(_error_message(response))
        return response.json()

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None


class _ServerError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _error_message(response: httpx.Response) -> str:
    """서버 오류 응답에서 사용자 메시지를 꺼냅니다."""
    try:
        data = response.json()
    except ValueError:
        return f"Server error: {response.status_code}"

    if isinstance(data, dict):
        detail = data.get("detail") or data.get("error")
        if isinstance(detail, str) and detail:
            return detail
    return f"Server error: {response.status_code}"
