"""ClassificationResult Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apps.scan.domain.enums import WasteCategory
from apps.scan.domain.value_objects.facility import Facility


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """분류 결과 Value Object.

    요청당 한 번 생성되며 변경되지 않습니다.

    Attributes:
        category: 폐기물 카테고리
        labels: Vision 라벨 (신뢰도 순)
        facilities: 주변 시설 (0~3개, Places 순위 그대로)
        instructions: 배출 안내
        tip: 감량 팁
    """

    category: WasteCategory
    labels: tuple[str, ...]
    facilities: tuple[Facility, ...]
    instructions: str
    tip: str

    @property
    def primary_label(self) -> str | None:
        """가장 신뢰도가 높은 라벨."""
        return self.labels[0] if self.labels else None

    def to_dict(self) -> dict[str, Any]:
        """API 응답 형식으로 변환."""
        return {
            "labels": list(self.labels),
            "wasteType": self.category.value,
            "locations": [f.to_dict() for f in self.facilities],
            "instructions": self.instructions,
            "tip": self.tip,
        }
