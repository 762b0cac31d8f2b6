"""Upload Orchestrator - 업로드 → 분류 → 진행도 갱신 흐름.

States:
    IDLE → IMAGE_SELECTED → CLASSIFYING → RESULT | ERROR
    (RESULT 위에 badge_notification이 겹쳐질 수 있음)

인스턴스당 동시에 하나의 분류만 진행합니다 (이미지를 다시 골라도 유지).
진행 중에 이미지를 다시 고르면 그 요청의 결과와 배지 알림은 화면에 반영되지
않지만, 진행도 기록은 그대로 수행합니다.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import TYPE_CHECKING, Callable

from apps.scan_client.application.common import (
    AuthenticationRequiredError,
    ClassificationInProgressError,
    ImageValidationError,
    NoImageSelectedError,
)
from apps.scan_client.domain import ClassificationView, SelectedImage, Session, UploadState

if TYPE_CHECKING:
    from apps.scan_client.application.ports import ScanApi, SessionProvider

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "image/jpg"})
MAX_IMAGE_BYTES = 5 * 1024 * 1024

INVALID_TYPE_MESSAGE = "Please upload a valid image (JPEG, PNG, or JPG)."
TOO_LARGE_MESSAGE = "Image size must be less than 5MB."
DEFAULT_FAILURE_MESSAGE = "Failed to classify image. Please try again."
PROGRESS_WARNING_MESSAGE = "Progress update failed. Please try again later."


def encode_image(data: bytes) -> str:
    """이미지 바이트 → 전송용 base64 문자열."""
    return base64.b64encode(data).decode("ascii")


class UploadOrchestrator:
    """업로드 화면 상태 머신."""

    def __init__(
        self,
        session_provider: "SessionProvider",
        api: "ScanApi",
        *,
        max_image_bytes: int = MAX_IMAGE_BYTES,
        allowed_content_types: frozenset[str] = ALLOWED_CONTENT_TYPES,
        on_auth_required: Callable[[], None] | None = None,
    ) -> None:
        """초기화.

        Args:
            session_provider: 세션 조회/로그아웃 포트
            api: Scan API 포트
            max_image_bytes: 허용 최대 이미지 크기
            allowed_content_types: 허용 MIME 타입
            on_auth_required: 세션이 없을 때 호출 (로그인 화면 이동 등)
        """
        self._sessions = session_provider
        self._api = api
        self._max_image_bytes = max_image_bytes
        self._allowed_content_types = allowed_content_types
        self._on_auth_required = on_auth_required

        self._state = UploadState.IDLE
        self._image: SelectedImage | None = None
        self._result: ClassificationView | None = None
        self._error: str | None = None
        self._badge_notification: str | None = None
        self._warnings: list[str] = []
        self._generation = 0
        self._in_flight = False

    # ─────────────────────────────────────────────────────────────────────
    # Read-only view state
    # ─────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> UploadState:
        return self._state

    @property
    def image(self) -> SelectedImage | None:
        return self._image

    @property
    def result(self) -> ClassificationView | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def badge_notification(self) -> str | None:
        return self._badge_notification

    @property
    def warnings(self) -> tuple[str, ...]:
        return tuple(self._warnings)

    @property
    def is_busy(self) -> bool:
        """분류 버튼 비활성화 여부 (요청이 진행 중이면 재선택 후에도 True)."""
        return self._in_flight

    # ─────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────

    def select_image(self, image: SelectedImage) -> None:
        """이미지를 선택합니다.

        Raises:
            ImageValidationError: 형식/크기 위반 (상태는 그대로)
        """
        if image.content_type.lower() not in self._allowed_content_types:
            self._reject(INVALID_TYPE_MESSAGE, image)
        if image.size > self._max_image_bytes:
            self._reject(TOO_LARGE_MESSAGE, image)

        self._generation += 1
        self._image = image
        self._result = None
        self._error = None
        self._badge_notification = None
        self._warnings.clear()
        self._state = UploadState.IMAGE_SELECTED

    def _reject(self, message: str, image: SelectedImage) -> None:
        logger.warning(
            "Image rejected: %s",
            message,
            extra={"content_type": image.content_type, "size": image.size},
        )
        self._error = message
        raise ImageValidationError(message)

    async def classify(self, location: tuple[float, float] | None = None) -> ClassificationView:
        """선택한 이미지를 분류하고 진행도를 갱신합니다.

        Args:
            location: (lat, lng). 있으면 주변 시설을 함께 조회합니다.

        Raises:
            ClassificationInProgressError: 이미 진행 중
            NoImageSelectedError: 선택한 이미지 없음
            AuthenticationRequiredError: 세션 없음
            ClassificationFailedError: 분류 API 실패
        """
        if self._in_flight:
            raise ClassificationInProgressError()
        if self._image is None:
            self._error = NoImageSelectedError().message
            raise NoImageSelectedError()

        image = self._image
        generation = self._generation
        self._in_flight = True
        self._state = UploadState.CLASSIFYING
        self._result = None
        self._error = None
        self._badge_notification = None
        self._warnings.clear()

        try:
            return await self._classify(image, generation, location)
        finally:
            self._in_flight = False

    async def _classify(
        self,
        image: SelectedImage,
        generation: int,
        location: tuple[float, float] | None,
    ) -> ClassificationView:
        try:
            session = await self._require_session()
            image_base64 = await asyncio.to_thread(encode_image, image.data)
            data = await self._api.classify_waste(
                access_token=session.access_token,
                image_base64=image_base64,
                user_id=session.user_id,
                user_location=(
                    {"lat": location[0], "lng": location[1]} if location is not None else None
                ),
            )
            view = ClassificationView.from_response(data)
        except Exception as e:
            if generation == self._generation:
                self._state = UploadState.ERROR
                self._error = getattr(e, "message", None) or str(e) or DEFAULT_FAILURE_MESSAGE
            logger.error("Classification error: %s", e, extra={"image_filename": image.filename})
            raise

        if generation == self._generation:
            self._result = view
            self._state = UploadState.RESULT
        # 다른 이미지가 선택됐어도 서버 분류는 성공했으므로 진행도는 기록한다 (표시만 생략)
        await self._update_progress(session, view.waste_type, generation)
        return view

    async def _require_session(self) -> Session:
        session = await self._sessions.get_session()
        if session is None:
            if self._on_auth_required is not None:
                self._on_auth_required()
            raise AuthenticationRequiredError()
        return session

    async def _update_progress(self, session: Session, waste_type: str, generation: int) -> None:
        """진행도 갱신. 실패는 경고로만 남기고 RESULT 상태를 유지합니다.

        분류 이후 이미지가 다시 선택됐다면 경고/배지 알림은 표시하지 않습니다.
        """
        try:
            progress = await self._api.record_progress(
                access_token=session.access_token,
                user_id=session.user_id,
                waste_type=waste_type,
            )
        except Exception as e:
            logger.warning("Failed to update progress: %s", e, extra={"user_id": session.user_id})
            if generation == self._generation:
                self._warnings.append(PROGRESS_WARNING_MESSAGE)
            return

        badge = progress.get("newlyAwardedBadge")
        if badge and generation == self._generation:
            self._badge_notification = badge

    async def sign_out(self) -> None:
        """로그아웃 후 초기 상태로 되돌립니다."""
        await self._sessions.sign_out()
        self._generation += 1
        self._image = None
        self._result = None
        self._error = None
        self._badge_notification = None
        self._warnings.clear()
        self._state = UploadState.IDLE
