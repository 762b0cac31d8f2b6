"""DetectedLabel Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DetectedLabel:
    """Vision 라벨 (모델 신뢰도 내림차순으로 전달됨).

    Attributes:
        text: 라벨 텍스트
        confidence: 신뢰도 (taxonomy에서는 사용하지 않음)
    """

    text: str
    confidence: float | None = None
