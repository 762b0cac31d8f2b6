"""Scan client models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class UploadState(str, Enum):
    """업로드 화면 상태."""

    IDLE = "idle"
    IMAGE_SELECTED = "image_selected"
    CLASSIFYING = "classifying"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class Session:
    """인증 세션 (opaque)."""

    access_token: str
    user_id: str


@dataclass(frozen=True)
class SelectedImage:
    """사용자가 선택한 이미지 파일."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class LocationView:
    name: str
    address: str
    rating: float | str


@dataclass(frozen=True)
class ClassificationView:
    """화면 표시용 분류 결과 (표시 주기 동안만 보관).

    Attributes:
        classification: 가장 신뢰도 높은 라벨
        waste_type: 카테고리
        locations: 주변 시설
        instructions: 배출 안내
        tip: 감량 팁
        labels: 전체 라벨
    """

    classification: str | None
    waste_type: str
    locations: tuple[LocationView, ...] = ()
    instructions: str = ""
    tip: str = ""
    labels: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> ClassificationView:
        labels = tuple(data.get("labels") or [])
        return cls(
            classification=labels[0] if labels else None,
            waste_type=data.get("wasteType", ""),
            locations=tuple(
                LocationView(
                    name=loc.get("name", ""),
                    address=loc.get("address", ""),
                    rating=loc.get("rating", "N/A"),
                )
                for loc in data.get("locations") or []
            ),
            instructions=data.get("instructions", ""),
            tip=data.get("tip", ""),
            labels=labels,
        )
