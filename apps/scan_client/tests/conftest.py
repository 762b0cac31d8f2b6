"""Pytest configuration for scan client tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from apps.scan_client.domain import SelectedImage, Session
from apps.scan_client.infrastructure.session import StaticSessionProvider

CLASSIFY_RESPONSE = {
    "labels": ["plastic bottle", "water"],
    "wasteType": "Recyclable",
    "locations": [{"name": "Eco Center", "address": "1 Green Rd", "rating": "N/A"}],
    "instructions": "Clean and place in the recycling bin",
    "tip": "Consider reusable alternatives",
}


@pytest.fixture
def session() -> Session:
    return Session(access_token="token-abc", user_id="user-1")


@pytest.fixture
def session_provider(session) -> StaticSessionProvider:
    return StaticSessionProvider(session)


@pytest.fixture
def mock_api():
    """Mock ScanApi."""
    api = AsyncMock()
    api.classify_waste = AsyncMock(return_value=dict(CLASSIFY_RESPONSE))
    api.record_progress = AsyncMock(
        return_value={"points": 20, "badges": ["Eco-Warrior"], "newlyAwardedBadge": "Eco-Warrior"}
    )
    return api


@pytest.fixture
def png() -> SelectedImage:
    return SelectedImage(filename="bottle.png", content_type="image/png", data=b"\x89PNG-data")
