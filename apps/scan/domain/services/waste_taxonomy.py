"""Waste Taxonomy - 라벨 → 폐기물 카테고리 매핑.

2단계 규칙:
    1. 라벨을 주어진 순서(신뢰도 순)로 훑어 어떤 키워드든 포함하는 첫 라벨을 고른다.
    2. 고른 라벨의 카테고리는 고정 우선순위
       (재활용 → 유해 → 기부 → 유기물)에서 처음 매칭되는 키워드 집합으로 정한다.

키워드 비교는 대소문자를 무시한 부분 문자열 포함입니다.
"""

from __future__ import annotations

from typing import Iterable

from apps.scan.domain.enums import WasteCategory

# 우선순위 순서가 곧 tie-break 규칙
CATEGORY_KEYWORDS: tuple[tuple[WasteCategory, tuple[str, ...]], ...] = (
    (
        WasteCategory.RECYCLABLE,
        ("plastic bottle", "bottle", "can", "paper", "plastic", "glass", "metal"),
    ),
    (WasteCategory.HAZARDOUS, ("battery", "electronics", "chemical", "paint")),
    (WasteCategory.DONATABLE, ("clothes", "furniture", "book")),
    (WasteCategory.ORGANIC, ("food", "organic")),
)

ALL_KEYWORDS: tuple[str, ...] = tuple(
    keyword for _, keywords in CATEGORY_KEYWORDS for keyword in keywords
)

DISPOSAL_INSTRUCTIONS: dict[str, str] = {
    "recyclable": "Clean and place in the recycling bin",
    "organic": "Place in the compost bin",
    "hazardous": "Take to a hazardous waste facility",
    "landfill": "Place in the general waste bin",
}
REDUCTION_TIPS: dict[str, str] = {
    "recyclable": "Consider reusable alternatives",
    "organic": "Try composting at home",
    "hazardous": "Look for eco-friendly alternatives",
    "landfill": "Look for recyclable alternatives",
}
DEFAULT_INSTRUCTIONS = "Check local disposal guidelines"
DEFAULT_TIP = "Reduce, Reuse, Recycle when possible"


def _contains_any(label: str, keywords: Iterable[str]) -> bool:
    return any(keyword in label for keyword in keywords)


def find_matched_label(labels: Iterable[str]) -> str | None:
    """어떤 키워드든 포함하는 첫 번째 라벨 (소문자)을 반환합니다."""
    for label in labels:
        normalized = label.lower()
        if _contains_any(normalized, ALL_KEYWORDS):
            return normalized
    return None


def classify(labels: Iterable[str]) -> WasteCategory:
    """라벨 목록을 정확히 하나의 카테고리로 분류합니다.

    Args:
        labels: Vision 라벨 (신뢰도 내림차순)

    Returns:
        매칭이 없거나 빈 입력이면 GENERAL_WASTE
    """
    matched = find_matched_label(labels)
    if matched is None:
        return WasteCategory.GENERAL_WASTE

    for category, keywords in CATEGORY_KEYWORDS:
        if _contains_any(matched, keywords):
            return category
    return WasteCategory.GENERAL_WASTE


def _lookup(table: dict[str, str], category: WasteCategory | str, default: str) -> str:
    key = category.value if isinstance(category, WasteCategory) else str(category)
    return table.get(key.strip().lower(), default)


def disposal_instructions(category: WasteCategory | str) -> str:
    """카테고리별 배출 안내. 알 수 없는 값은 기본 안내로 대체."""
    return _lookup(DISPOSAL_INSTRUCTIONS, category, DEFAULT_INSTRUCTIONS)


def reduction_tip(category: WasteCategory | str) -> str:
    """카테고리별 감량 팁. 알 수 없는 값은 기본 팁으로 대체."""
    return _lookup(REDUCTION_TIPS, category, DEFAULT_TIP)
