"""Record Classification Command.

분류 이벤트 1건을 기록하고 points/badges를 하나의 트랜잭션으로 갱신합니다.
진행도 행은 get_for_update로 잠그므로 같은 사용자의 동시 분류도
포인트 유실이나 배지 중복 지급 없이 직렬화됩니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.scan.application.common.exceptions import PersistenceError
from apps.scan.domain.entities import ClassificationEvent
from apps.scan.domain.enums import WasteCategory
from apps.scan.domain.exceptions import ProgressNotFoundError

if TYPE_CHECKING:
    from apps.scan.application.progress.ports import ProgressGateway, TransactionManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordClassificationRequest:
    """진행도 갱신 요청 DTO."""

    user_id: str
    category: WasteCategory


@dataclass(frozen=True)
class RecordClassificationResult:
    """진행도 갱신 결과 DTO.

    Attributes:
        points: 갱신 후 누적 포인트
        badges: 갱신 후 배지 목록 (획득 순)
        newly_awarded_badge: 이번 이벤트로 처음 획득한 배지
    """

    points: int
    badges: tuple[str, ...]
    newly_awarded_badge: str | None = None


class RecordClassificationCommand:
    """진행도 원장 Command."""

    def __init__(
        self,
        gateway: "ProgressGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._gateway = gateway
        self._tx = transaction_manager

    async def execute(self, request: RecordClassificationRequest) -> RecordClassificationResult:
        event = ClassificationEvent.record(request.user_id, request.category)

        try:
            await self._gateway.add_event(event)
            progress = await self._gateway.get_for_update(request.user_id)
            if progress is None:
                raise ProgressNotFoundError(request.user_id)

            awarded = progress.apply_classification(request.category)
            await self._gateway.save(progress)
            await self._tx.commit()
        except ProgressNotFoundError as e:
            await self._tx.rollback()
            logger.error("Progress update failed: %s", e.message, extra={"user_id": request.user_id})
            raise PersistenceError(e.message) from e
        except PersistenceError as e:
            await self._tx.rollback()
            logger.error(
                "Progress update failed: %s",
                e.message,
                extra={"user_id": request.user_id, "category": request.category.value},
            )
            raise

        if awarded:
            logger.info("Badge awarded", extra={"user_id": request.user_id, "badge": awarded})

        return RecordClassificationResult(
            points=progress.points,
            badges=tuple(progress.badges),
            newly_awarded_badge=awarded,
        )
