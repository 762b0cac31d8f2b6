"""UserProgress Entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from apps.scan.domain.enums import WasteCategory

ECO_WARRIOR_BADGE = "Eco-Warrior"
RECYCLABLE_POINTS = 20
NON_RECYCLABLE_POINTS = 5


@dataclass
class UserProgress:
    """사용자 진행도 엔티티.

    users 테이블의 points/badges 컬럼에 매핑됩니다.
    badges는 중복 없이 획득 순서를 유지합니다.
    """

    user_id: str
    points: int = 0
    badges: list[str] = field(default_factory=list)

    def apply_classification(self, category: WasteCategory) -> str | None:
        """분류 결과를 반영하고, 이번에 처음 획득한 배지를 반환합니다."""
        recyclable = WasteCategory.is_rewardable(category.value)
        self.points += RECYCLABLE_POINTS if recyclable else NON_RECYCLABLE_POINTS

        if recyclable and ECO_WARRIOR_BADGE not in self.badges:
            self.badges.append(ECO_WARRIOR_BADGE)
            return ECO_WARRIOR_BADGE
        return None
