"""RecordClassificationCommand Tests."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from apps.scan.application.common.exceptions import PersistenceError
from apps.scan.application.progress.commands import (
    RecordClassificationCommand,
    RecordClassificationRequest,
)
from apps.scan.application.progress.ports import ProgressGateway
from apps.scan.domain.entities import ClassificationEvent, UserProgress
from apps.scan.domain.entities.user_progress import ECO_WARRIOR_BADGE
from apps.scan.domain.enums import WasteCategory


class InMemoryStore:
    """users/classifications 테이블 대역.

    get_for_update 시 사용자별 Lock을 잡고 commit/rollback 시 풉니다.
    """

    def __init__(self, users: dict[str, UserProgress]) -> None:
        self.users = users
        self.events: list[ClassificationEvent] = []
        self.locks: dict[str, asyncio.Lock] = {}


class InMemoryGateway(ProgressGateway):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._pending_events: list[ClassificationEvent] = []
        self._pending_progress: UserProgress | None = None
        self.held: asyncio.Lock | None = None

    async def add_event(self, event: ClassificationEvent) -> None:
        self._pending_events.append(event)

    async def get_for_update(self, user_id: str) -> UserProgress | None:
        lock = self._store.locks.setdefault(user_id, asyncio.Lock())
        await lock.acquire()
        self.held = lock
        stored = self._store.users.get(user_id)
        if stored is None:
            return None
        # 읽기와 쓰기 사이에 다른 태스크가 끼어들 여지를 준다
        await asyncio.sleep(0)
        return UserProgress(user_id=user_id, points=stored.points, badges=list(stored.badges))

    async def save(self, progress: UserProgress) -> None:
        self._pending_progress = progress


class InMemoryTransaction:
    def __init__(self, store: InMemoryStore, gateway: InMemoryGateway) -> None:
        self._store = store
        self._gateway = gateway
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self._store.events.extend(self._gateway._pending_events)
        progress = self._gateway._pending_progress
        if progress is not None:
            self._store.users[progress.user_id] = progress
        self.committed = True
        self._release()

    async def rollback(self) -> None:
        self.rolled_back = True
        self._release()

    def _release(self) -> None:
        if self._gateway.held is not None:
            self._gateway.held.release()
            self._gateway.held = None


def _command(store: InMemoryStore) -> tuple[RecordClassificationCommand, InMemoryTransaction]:
    gateway = InMemoryGateway(store)
    tx = InMemoryTransaction(store, gateway)
    return RecordClassificationCommand(gateway=gateway, transaction_manager=tx), tx


@pytest.fixture
def store():
    return InMemoryStore({"user-1": UserProgress(user_id="user-1")})


@pytest.mark.asyncio
class TestRecordClassification:
    """execute() 테스트."""

    async def test_recyclable_awards_points_and_badge(self, store):
        command, tx = _command(store)

        result = await command.execute(
            RecordClassificationRequest(user_id="user-1", category=WasteCategory.RECYCLABLE)
        )

        assert result.points == 20
        assert result.badges == (ECO_WARRIOR_BADGE,)
        assert result.newly_awarded_badge == ECO_WARRIOR_BADGE
        assert tx.committed
        event = store.events[0]
        assert (event.result, event.weight) == ("Recyclable", 0.1)

    async def test_badge_awarded_once(self, store):
        """두 번째 재활용 분류는 배지를 다시 알리지 않음."""
        first, _ = _command(store)
        second, _ = _command(store)
        request = RecordClassificationRequest(user_id="user-1", category=WasteCategory.RECYCLABLE)

        await first.execute(request)
        result = await second.execute(request)

        assert result.points == 40
        assert result.badges == (ECO_WARRIOR_BADGE,)
        assert result.newly_awarded_badge is None

    @pytest.mark.parametrize(
        "category",
        [
            WasteCategory.ORGANIC,
            WasteCategory.HAZARDOUS,
            WasteCategory.DONATABLE,
            WasteCategory.GENERAL_WASTE,
        ],
    )
    async def test_non_recyclable(self, store, category):
        command, _ = _command(store)

        result = await command.execute(RecordClassificationRequest(user_id="user-1", category=category))

        assert result.points == 5
        assert result.badges == ()
        assert result.newly_awarded_badge is None
        event = store.events[0]
        assert (event.result, event.weight) == ("Non-Recyclable", 0.0)
        assert event.category is category

    async def test_concurrent_same_user(self, store):
        """같은 사용자의 동시 분류: 포인트 유실/배지 중복 없음."""
        categories = [WasteCategory.RECYCLABLE] * 5 + [WasteCategory.ORGANIC] * 5
        commands = [_command(store)[0] for _ in categories]

        results = await asyncio.gather(
            *(
                command.execute(RecordClassificationRequest(user_id="user-1", category=category))
                for command, category in zip(commands, categories)
            )
        )

        assert store.users["user-1"].points == 5 * 20 + 5 * 5
        assert store.users["user-1"].badges == [ECO_WARRIOR_BADGE]
        assert sum(1 for r in results if r.newly_awarded_badge) == 1
        assert len(store.events) == 10

    async def test_missing_user_row(self):
        store = InMemoryStore({})
        command, tx = _command(store)

        with pytest.raises(PersistenceError, match="User progress not found"):
            await command.execute(
                RecordClassificationRequest(user_id="ghost", category=WasteCategory.RECYCLABLE)
            )

        assert tx.rolled_back
        assert store.events == []

    async def test_gateway_failure_rolls_back(self):
        gateway = AsyncMock(spec=ProgressGateway)
        gateway.add_event.side_effect = PersistenceError("Failed to save classification")
        tx = AsyncMock()
        command = RecordClassificationCommand(gateway=gateway, transaction_manager=tx)

        with pytest.raises(PersistenceError, match="Failed to save classification"):
            await command.execute(
                RecordClassificationRequest(user_id="user-1", category=WasteCategory.ORGANIC)
            )

        tx.rollback.assert_awaited_once()
        tx.commit.assert_not_awaited()
        gateway.save.assert_not_awaited()


class TestUserProgress:
    """UserProgress 엔티티."""

    def test_badge_order_preserved(self):
        progress = UserProgress(user_id="u", points=3, badges=["Early-Adopter"])

        awarded = progress.apply_classification(WasteCategory.RECYCLABLE)

        assert awarded == ECO_WARRIOR_BADGE
        assert progress.badges == ["Early-Adopter", ECO_WARRIOR_BADGE]
        assert progress.points == 23
