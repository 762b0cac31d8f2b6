"""Get Categories Query - 카테고리 목록 조회."""

from __future__ import annotations

from dataclasses import dataclass

from apps.scan.application.facility.queries import FindNearbyFacilitiesQuery
from apps.scan.domain.enums import WasteCategory
from apps.scan.domain.services import waste_taxonomy


@dataclass(frozen=True)
class WasteCategoryInfo:
    """카테고리 안내 DTO."""

    name: str
    keywords: tuple[str, ...]
    instructions: str
    tip: str
    facility_keyword: str


class GetCategoriesQuery:
    """카테고리 목록 조회 Query.

    정적 데이터이므로 외부 의존성이 없습니다. 순서는 tie-break 우선순위와 같고
    GENERAL_WASTE가 마지막입니다.
    """

    def execute(self) -> list[WasteCategoryInfo]:
        keywords = dict(waste_taxonomy.CATEGORY_KEYWORDS)
        return [
            WasteCategoryInfo(
                name=category.value,
                keywords=keywords.get(category, ()),
                instructions=waste_taxonomy.disposal_instructions(category),
                tip=waste_taxonomy.reduction_tip(category),
                facility_keyword=FindNearbyFacilitiesQuery.keyword_for(category),
            )
            for category in WasteCategory
        ]
