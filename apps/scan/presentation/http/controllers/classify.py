"""Classify Waste Controller.

- POST /classify-waste: 이미지 분류 + 주변 시설
- GET /categories: 카테고리 안내
"""

from __future__ import annotations

import base64
import binascii
import logging

from fastapi import APIRouter

from apps.scan.application.classify.commands import ClassifyWasteRequest
from apps.scan.application.common.exceptions import (
    AuthenticationRequiredError,
    InvalidImageError,
)
from apps.scan.domain.value_objects import GeoPoint
from apps.scan.presentation.http.schemas import (
    ClassifyWasteBody,
    ClassifyWasteResponse,
    WasteCategoryItem,
)
from apps.scan.setup.dependencies import (
    ClassifyCommandDep,
    GetCategoriesQueryDep,
    SessionUserIdDep,
    SettingsDep,
)

router = APIRouter(tags=["classify"])
logger = logging.getLogger(__name__)


def _decode_image(image_base64: str) -> bytes:
    """base64 (data URL 허용) → 이미지 바이트."""
    content = image_base64.strip()
    if content.startswith("data:") and "," in content:
        content = content.split(",", 1)[1]
    try:
        return base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError("imageBase64 is not valid base64") from e


@router.post(
    "/classify-waste",
    response_model=ClassifyWasteResponse,
    summary="Classify a waste image and find nearby facilities",
)
async def classify_waste(
    payload: ClassifyWasteBody,
    session_user_id: SessionUserIdDep,
    command: ClassifyCommandDep,
    settings: SettingsDep,
) -> ClassifyWasteResponse:
    """이미지를 분류하고, 위치가 있으면 주변 처리 시설을 함께 반환합니다."""
    if settings.auth_disabled:
        session_user_id = payload.user_id
    elif session_user_id is None:
        raise AuthenticationRequiredError()

    location = None
    if payload.user_location is not None:
        location = GeoPoint(lat=payload.user_location.lat, lng=payload.user_location.lng)

    request = ClassifyWasteRequest(
        image_bytes=_decode_image(payload.image_base64),
        user_id=payload.user_id,
        session_user_id=session_user_id,
        location=location,
    )
    result = await command.execute(request)

    return ClassifyWasteResponse.model_validate(result.to_dict())


@router.get(
    "/categories",
    response_model=list[WasteCategoryItem],
    summary="Supported waste categories",
)
def get_categories(query: GetCategoriesQueryDep) -> list[WasteCategoryItem]:
    """지원하는 폐기물 카테고리 목록을 반환합니다."""
    return [
        WasteCategoryItem(
            name=info.name,
            keywords=list(info.keywords),
            instructions=info.instructions,
            tip=info.tip,
            facility_keyword=info.facility_keyword,
        )
        for info in query.execute()
    ]
