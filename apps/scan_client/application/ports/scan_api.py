"""Scan API Port."""

from __future__ import annotations

from typing import Any, Protocol


class ScanApi(Protocol):
    """Scan 서버 API 포트."""

    async def classify_waste(
        self,
        *,
        access_token: str,
        image_base64: str,
        user_id: str,
        user_location: dict[str, float] | None = None,
    ) -> dict[str, Any]:
        """분류 요청. 실패 시 ClassificationFailedError."""
        ...

    async def record_progress(
        self,
        *,
        access_token: str,
        user_id: str,
        waste_type: str,
    ) -> dict[str, Any]:
        """진행도 갱신. 실패 시 ProgressUpdateError."""
        ...
