"""Progress Gateway Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from apps.scan.domain.entities import ClassificationEvent, UserProgress


class ProgressGateway(ABC):
    """사용자 진행도/분류 이벤트 저장 포트.

    구현체는 한 트랜잭션 안에서 호출되며, 저장소 오류는
    PersistenceError로 변환해야 합니다.
    """

    @abstractmethod
    async def add_event(self, event: ClassificationEvent) -> None:
        """분류 이벤트를 append 합니다."""
        ...

    @abstractmethod
    async def get_for_update(self, user_id: str) -> UserProgress | None:
        """진행도를 조회하고 트랜잭션 종료까지 해당 행을 잠급니다."""
        ...

    @abstractmethod
    async def save(self, progress: UserProgress) -> None:
        """points/badges를 기록합니다."""
        ...
