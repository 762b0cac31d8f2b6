"""Facility Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNRATED = "N/A"


@dataclass(frozen=True, slots=True)
class Facility:
    """주변 처리 시설 (Places 결과의 읽기 전용 투영).

    Attributes:
        name: 시설명
        address: 주소
        rating: 평점, 없으면 ``"N/A"``
    """

    name: str
    address: str
    rating: float | str = UNRATED

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "address": self.address, "rating": self.rating}
