"""Progress Controller.

- POST /progress: 분류 결과를 진행도(points/badges)에 반영
"""

from __future__ import annotations

from fastapi import APIRouter

from apps.scan.application.common.exceptions import (
    AuthenticationRequiredError,
    InvalidSessionError,
)
from apps.scan.application.progress.commands import RecordClassificationRequest
from apps.scan.domain.enums import WasteCategory
from apps.scan.domain.exceptions import UnknownWasteCategoryError
from apps.scan.presentation.http.schemas import RecordProgressBody, RecordProgressResponse
from apps.scan.setup.dependencies import RecordCommandDep, SessionUserIdDep, SettingsDep

router = APIRouter(tags=["progress"])


@router.post(
    "/progress",
    response_model=RecordProgressResponse,
    summary="Record a classification and update points/badges",
)
async def record_progress(
    payload: RecordProgressBody,
    session_user_id: SessionUserIdDep,
    command: RecordCommandDep,
    settings: SettingsDep,
) -> RecordProgressResponse:
    """분류 이벤트를 기록하고 갱신된 진행도를 반환합니다."""
    if not settings.auth_disabled:
        if session_user_id is None:
            raise AuthenticationRequiredError()
        if session_user_id != payload.user_id:
            raise InvalidSessionError("Session does not match userId")

    category = WasteCategory.parse(payload.waste_type)
    if category is None:
        raise UnknownWasteCategoryError(payload.waste_type)

    result = await command.execute(
        RecordClassificationRequest(user_id=payload.user_id, category=category)
    )
    return RecordProgressResponse(
        points=result.points,
        badges=list(result.badges),
        newly_awarded_badge=result.newly_awarded_badge,
    )
