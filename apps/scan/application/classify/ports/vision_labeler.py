"""Vision Labeler Port - 이미지 라벨 검출 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod

from apps.scan.domain.value_objects import DetectedLabel


class VisionLabelerPort(ABC):
    """이미지 라벨 검출 포트.

    Google Cloud Vision 등 외부 구현체를 DI로 주입.
    """

    @abstractmethod
    async def detect_labels(self, image: bytes) -> list[DetectedLabel]:
        """이미지에서 라벨을 검출합니다.

        Args:
            image: 원본 이미지 바이트

        Returns:
            신뢰도 내림차순 라벨 목록
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
