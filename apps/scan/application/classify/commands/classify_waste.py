"""Classify Waste Command - 이미지 분류 파이프라인.

Workflow:
    1. 세션/입력 검증
    2. Vision 라벨 검출 (재시도 + 타임아웃)
    3. Taxonomy로 카테고리 결정
    4. 위치가 있으면 주변 시설 조회 (best-effort)
    5. ClassificationResult 조립
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.scan.application.common.exceptions import (
    AuthenticationRequiredError,
    InvalidImageError,
    InvalidSessionError,
    MissingFieldError,
    UpstreamFailureError,
    UpstreamTimeoutError,
)
from apps.scan.domain.services import waste_taxonomy
from apps.scan.domain.value_objects import ClassificationResult, GeoPoint

if TYPE_CHECKING:
    from apps.scan.application.classify.ports import VisionLabelerPort
    from apps.scan.application.facility.queries import FindNearbyFacilitiesQuery
    from apps.scan.domain.value_objects import DetectedLabel
    from apps.scan.infrastructure.error_handling import LinearBackoff

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifyWasteRequest:
    """분류 요청 DTO (1회용).

    Attributes:
        image_bytes: 원본 이미지
        user_id: 요청 본문의 사용자 ID
        session_user_id: 검증된 세션의 사용자 ID (없으면 None)
        location: 사용자 위치 (선택)
    """

    image_bytes: bytes
    user_id: str
    session_user_id: str | None = None
    location: GeoPoint | None = None


class ClassifyWasteCommand:
    """폐기물 분류 Command.

    Vision 실패는 요청 전체를 실패시키고, 시설 조회 실패는 빈 목록으로 대체됩니다.
    """

    def __init__(
        self,
        vision: "VisionLabelerPort",
        facility_query: "FindNearbyFacilitiesQuery",
        retrier: "LinearBackoff",
    ) -> None:
        """초기화.

        Args:
            vision: 라벨 검출 포트
            facility_query: 주변 시설 조회 Query
            retrier: Vision 호출 재시도 실행기
        """
        self._vision = vision
        self._facility_query = facility_query
        self._retrier = retrier

    async def execute(self, request: ClassifyWasteRequest) -> ClassificationResult:
        self._validate(request)

        detected = await self._detect_labels(request)
        labels = tuple(label.text.lower() for label in detected)
        category = waste_taxonomy.classify(labels)

        facilities = ()
        if request.location is not None:
            facilities = await self._facility_query.execute(category, request.location)

        logger.info(
            "Classification completed",
            extra={
                "user_id": request.user_id,
                "category": category.value,
                "labels_count": len(labels),
                "facilities_count": len(facilities),
            },
        )
        return ClassificationResult(
            category=category,
            labels=labels,
            facilities=facilities,
            instructions=waste_taxonomy.disposal_instructions(category),
            tip=waste_taxonomy.reduction_tip(category),
        )

    @staticmethod
    def _validate(request: ClassifyWasteRequest) -> None:
        if request.session_user_id is None:
            raise AuthenticationRequiredError()
        if not request.user_id:
            raise MissingFieldError("userId")
        if request.session_user_id != request.user_id:
            raise InvalidSessionError("Session does not match userId")
        if not request.image_bytes:
            raise InvalidImageError()

    async def _detect_labels(self, request: ClassifyWasteRequest) -> list["DetectedLabel"]:
        try:
            return await self._retrier.execute(
                lambda: self._vision.detect_labels(request.image_bytes)
            )
        except TimeoutError as e:
            logger.error(
                "Vision label detection timed out",
                extra={"stage": "vision", "user_id": request.user_id, "error": str(e)},
            )
            raise UpstreamTimeoutError() from e
        except Exception as e:
            logger.error(
                "Vision label detection failed",
                extra={
                    "stage": "vision",
                    "user_id": request.user_id,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            raise UpstreamFailureError() from e
