"""Store connectivity check.

애플리케이션 시작 시(lifespan) 또는 /ready 에서 명시적으로 호출합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from apps.scan.infrastructure.persistence_postgres.tables import users_table

if TYPE_CHECKING:
    from apps.scan.infrastructure.error_handling import LinearBackoff, RetryPolicy

logger = logging.getLogger(__name__)


async def check_store_connection(
    session_factory: async_sessionmaker[AsyncSession],
    retrier: "LinearBackoff",
    policy: "RetryPolicy | None" = None,
) -> None:
    """users 테이블에 한 행 조회를 시도합니다.

    Raises:
        마지막 시도의 예외 (재시도 모두 실패 시)
    """

    async def probe() -> None:
        async with session_factory() as session:
            await session.execute(select(users_table.c.id).limit(1))

    logger.info("Store: testing connection")
    await retrier.execute(probe, policy)
    logger.info("Store: connection test successful")
