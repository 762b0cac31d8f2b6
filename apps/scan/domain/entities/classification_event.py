"""ClassificationEvent Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from apps.scan.domain.enums import WasteCategory

RECYCLABLE_RESULT = "Recyclable"
NON_RECYCLABLE_RESULT = "Non-Recyclable"
RECYCLABLE_WEIGHT = 0.1


@dataclass(frozen=True)
class ClassificationEvent:
    """분류 이벤트 (append-only 원장 행).

    성공한 분류 1건당 1행. 이 서비스는 수정/삭제하지 않습니다.
    """

    user_id: str
    category: WasteCategory
    result: str
    weight: float
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def record(cls, user_id: str, category: WasteCategory) -> ClassificationEvent:
        recyclable = WasteCategory.is_rewardable(category.value)
        return cls(
            user_id=user_id,
            category=category,
            result=RECYCLABLE_RESULT if recyclable else NON_RECYCLABLE_RESULT,
            weight=RECYCLABLE_WEIGHT if recyclable else 0.0,
        )
