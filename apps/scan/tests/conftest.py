"""Pytest configuration for scan tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from apps.scan.domain.value_objects import DetectedLabel
from apps.scan.infrastructure.error_handling import LinearBackoff, RetryPolicy


class FakeSleep:
    """asyncio.sleep 대체 (지연 시간만 기록)."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.calls.append(delay)


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def retrier(fake_sleep) -> LinearBackoff:
    """실제 대기 없이 동작하는 재시도 실행기."""
    return LinearBackoff(RetryPolicy(max_retries=3, base_delay_ms=1000, timeout_ms=1000), fake_sleep)


@pytest.fixture
def mock_vision():
    """Mock VisionLabelerPort."""
    vision = AsyncMock()
    vision.detect_labels = AsyncMock(
        return_value=[
            DetectedLabel(text="Plastic Bottle", confidence=0.97),
            DetectedLabel(text="Water", confidence=0.85),
        ]
    )
    return vision


@pytest.fixture
def mock_places():
    """Mock PlacesClientPort."""
    places = AsyncMock()
    places.search_nearby = AsyncMock(return_value=[])
    return places
