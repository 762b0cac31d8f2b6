"""Waste Category Enum."""

from __future__ import annotations

from enum import Enum


class WasteCategory(str, Enum):
    """폐기물 분류 결과 (닫힌 열거형).

    값은 API 응답의 ``wasteType`` 문자열과 동일합니다.
    보상 조건: 재활용(RECYCLABLE)만 리워드 대상.
    """

    RECYCLABLE = "Recyclable"
    HAZARDOUS = "Hazardous"
    DONATABLE = "Donatable"
    ORGANIC = "Organic"
    GENERAL_WASTE = "General Waste"

    @classmethod
    def is_rewardable(cls, category: str) -> bool:
        """리워드 대상 카테고리인지 확인 (대소문자 무시)."""
        return category.strip().lower() == cls.RECYCLABLE.value.lower()

    @classmethod
    def parse(cls, value: str) -> WasteCategory | None:
        """경계에서 들어온 자유 형식 문자열을 카테고리로 변환합니다."""
        normalized = value.strip().lower()
        for category in cls:
            if normalized in (category.value.lower(), category.name.lower()):
                return category
        return None
