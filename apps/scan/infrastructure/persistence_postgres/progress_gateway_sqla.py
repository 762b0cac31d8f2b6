"""SQLAlchemy implementation of progress gateway."""

from __future__ import annotations

import logging

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.scan.application.common.exceptions import PersistenceError
from apps.scan.application.progress.ports import ProgressGateway
from apps.scan.domain.entities import ClassificationEvent, UserProgress
from apps.scan.infrastructure.persistence_postgres.tables import (
    classifications_table,
    users_table,
)

logger = logging.getLogger(__name__)


class SqlaProgressGateway(ProgressGateway):
    """진행도 게이트웨이 SQLAlchemy 구현.

    get_for_update는 SELECT ... FOR UPDATE로 사용자 행을 잠급니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_event(self, event: ClassificationEvent) -> None:
        """분류 이벤트를 추가합니다."""
        stmt = insert(classifications_table).values(
            user_id=event.user_id,
            item=event.category.value,
            result=event.result,
            weight=event.weight,
            created_at=event.created_at,
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Insert classification failed", extra={"user_id": event.user_id})
            raise PersistenceError("Failed to save classification") from e

    async def get_for_update(self, user_id: str) -> UserProgress | None:
        """진행도를 잠금과 함께 조회합니다."""
        stmt = (
            select(users_table.c.points, users_table.c.badges)
            .where(users_table.c.id == user_id)
            .with_for_update()
        )
        try:
            result = await self._session.execute(stmt)
            row = result.one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to fetch user data") from e

        if row is None:
            return None
        return UserProgress(
            user_id=user_id,
            points=row.points or 0,
            badges=list(row.badges or []),
        )

    async def save(self, progress: UserProgress) -> None:
        """points/badges를 갱신합니다."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == progress.user_id)
            .values(points=progress.points, badges=list(progress.badges))
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to update points") from e
