"""ClassifyWasteCommand Tests."""

import asyncio

import pytest

from apps.scan.application.classify.commands import (
    ClassifyWasteCommand,
    ClassifyWasteRequest,
)
from apps.scan.application.common.exceptions import (
    AuthenticationRequiredError,
    InvalidImageError,
    InvalidSessionError,
    MissingFieldError,
    UpstreamFailureError,
    UpstreamTimeoutError,
)
from apps.scan.application.facility.ports import PlaceDTO
from apps.scan.application.facility.queries import FindNearbyFacilitiesQuery
from apps.scan.domain.enums import WasteCategory
from apps.scan.domain.value_objects import DetectedLabel, Facility, GeoPoint
from apps.scan.infrastructure.error_handling import LinearBackoff, RetryPolicy

IMAGE = b"\x89PNG\r\n\x1a\nfake"
LOCATION = GeoPoint(lat=37.5, lng=127.0)


def _request(**overrides) -> ClassifyWasteRequest:
    values = {"image_bytes": IMAGE, "user_id": "user-1", "session_user_id": "user-1"}
    values.update(overrides)
    return ClassifyWasteRequest(**values)


@pytest.fixture
def command(mock_vision, mock_places, retrier):
    """Command 인스턴스."""
    return ClassifyWasteCommand(
        vision=mock_vision,
        facility_query=FindNearbyFacilitiesQuery(mock_places),
        retrier=retrier,
    )


class TestValidation:
    """입력/세션 검증."""

    @pytest.mark.asyncio
    async def test_missing_session(self, command, mock_vision):
        with pytest.raises(AuthenticationRequiredError):
            await command.execute(_request(session_user_id=None))
        mock_vision.detect_labels.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_user_id(self, command):
        with pytest.raises(MissingFieldError, match="userId"):
            await command.execute(_request(user_id=""))

    @pytest.mark.asyncio
    async def test_session_mismatch(self, command, mock_vision):
        with pytest.raises(InvalidSessionError):
            await command.execute(_request(session_user_id="someone-else"))
        mock_vision.detect_labels.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_image(self, command):
        with pytest.raises(InvalidImageError):
            await command.execute(_request(image_bytes=b""))


@pytest.mark.asyncio
class TestExecute:
    """execute() 테스트."""

    async def test_plastic_bottle_with_location(self, command, mock_places):
        """재활용 분류 + 주변 시설 3개 (누락 평점은 N/A)."""
        mock_places.search_nearby.return_value = [
            PlaceDTO(name="Recycle A", vicinity="Addr A", rating=4.5),
            PlaceDTO(name="Recycle B", vicinity="Addr B"),
            PlaceDTO(name="Recycle C", vicinity="Addr C", rating=3.9),
            PlaceDTO(name="Recycle D", vicinity="Addr D", rating=5.0),
        ]

        result = await command.execute(_request(location=LOCATION))

        assert result.category is WasteCategory.RECYCLABLE
        assert result.labels == ("plastic bottle", "water")
        assert result.primary_label == "plastic bottle"
        assert result.facilities == (
            Facility(name="Recycle A", address="Addr A", rating=4.5),
            Facility(name="Recycle B", address="Addr B", rating="N/A"),
            Facility(name="Recycle C", address="Addr C", rating=3.9),
        )
        assert result.instructions == "Clean and place in the recycling bin"
        assert result.tip == "Consider reusable alternatives"
        assert mock_places.search_nearby.await_args.kwargs["keyword"] == "recycling center"

    async def test_unknown_object_without_location(self, command, mock_vision, mock_places):
        """매칭 없음 → General Waste, 위치 없으면 시설 조회 생략."""
        mock_vision.detect_labels.return_value = [DetectedLabel(text="Unknown Object", confidence=0.5)]

        result = await command.execute(_request())

        assert result.category is WasteCategory.GENERAL_WASTE
        assert result.facilities == ()
        assert result.instructions == "Check local disposal guidelines"
        assert result.tip == "Reduce, Reuse, Recycle when possible"
        mock_places.search_nearby.assert_not_awaited()

    async def test_facility_failure_does_not_fail(self, command, mock_places):
        mock_places.search_nearby.side_effect = ConnectionError("quota")

        result = await command.execute(_request(location=LOCATION))

        assert result.category is WasteCategory.RECYCLABLE
        assert result.facilities == ()

    async def test_to_dict_wire_format(self, command):
        result = await command.execute(_request())

        assert result.to_dict() == {
            "labels": ["plastic bottle", "water"],
            "wasteType": "Recyclable",
            "locations": [],
            "instructions": "Clean and place in the recycling bin",
            "tip": "Consider reusable alternatives",
        }

    async def test_vision_retried_then_succeeds(self, command, mock_vision, fake_sleep):
        mock_vision.detect_labels.side_effect = [
            ConnectionError("reset"),
            [DetectedLabel(text="Banana", confidence=0.9), DetectedLabel(text="Food", confidence=0.8)],
        ]

        result = await command.execute(_request())

        assert result.category is WasteCategory.ORGANIC
        assert mock_vision.detect_labels.await_count == 2
        assert fake_sleep.calls == [1.0]

    async def test_vision_failure_is_fatal(self, command, mock_vision, mock_places):
        mock_vision.detect_labels.side_effect = ConnectionError("down")

        with pytest.raises(UpstreamFailureError, match="Failed to classify image"):
            await command.execute(_request(location=LOCATION))

        assert mock_vision.detect_labels.await_count == 3
        mock_places.search_nearby.assert_not_awaited()

    async def test_vision_timeout(self, mock_vision, mock_places, fake_sleep):
        async def hang(image):
            await asyncio.sleep(5)

        mock_vision.detect_labels.side_effect = hang
        command = ClassifyWasteCommand(
            vision=mock_vision,
            facility_query=FindNearbyFacilitiesQuery(mock_places),
            retrier=LinearBackoff(RetryPolicy(max_retries=2, base_delay_ms=0, timeout_ms=10), fake_sleep),
        )

        with pytest.raises(UpstreamTimeoutError):
            await command.execute(_request())
