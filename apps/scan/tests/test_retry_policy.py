"""LinearBackoff Tests."""

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from apps.scan.infrastructure.error_handling import (
    LinearBackoff,
    OperationTimeoutError,
    RetryPolicy,
)


class TestRetryPolicy:
    """RetryPolicy 검증 테스트."""

    def test_defaults(self):
        policy = RetryPolicy()
        assert policy.max_retries == 3
        assert policy.base_delay_ms == 1000
        assert policy.timeout_ms == 20000

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_retries": 0}, {"base_delay_ms": -1}, {"timeout_ms": 0}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RetryPolicy(**kwargs)

    def test_timeout_is_timeout_error(self):
        """시도 타임아웃은 TimeoutError 계열."""
        assert issubclass(OperationTimeoutError, TimeoutError)


class TestCalculateDelay:
    """calculate_delay() 테스트."""

    def test_linear(self):
        backoff = LinearBackoff(RetryPolicy(base_delay_ms=1000))
        assert [backoff.calculate_delay(n) for n in (1, 2, 3)] == [1.0, 2.0, 3.0]

    def test_policy_override(self):
        backoff = LinearBackoff()
        assert backoff.calculate_delay(2, RetryPolicy(base_delay_ms=250)) == 0.5


@pytest.mark.asyncio
class TestExecute:
    """execute() 테스트."""

    async def test_first_attempt_success(self, retrier, fake_sleep):
        operation = AsyncMock(return_value="ok")

        assert await retrier.execute(operation) == "ok"
        assert operation.await_count == 1
        assert fake_sleep.calls == []

    async def test_succeeds_on_third_attempt(self, retrier, fake_sleep, caplog):
        """두 번 실패 후 성공: 경고 로그 2건, 지연 1s → 2s."""
        operation = AsyncMock(side_effect=[ConnectionError("e1"), ConnectionError("e2"), "ok"])

        with caplog.at_level(logging.WARNING):
            result = await retrier.execute(operation)

        assert result == "ok"
        assert operation.await_count == 3
        assert fake_sleep.calls == [1.0, 2.0]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert [r.getMessage() for r in warnings] == [
            "Retry 1/3 after error: e1",
            "Retry 2/3 after error: e2",
        ]

    async def test_exhausted_raises_last_error(self, retrier, fake_sleep, caplog):
        """max_retries 모두 실패 → 마지막 예외 전파."""
        operation = AsyncMock(
            side_effect=[ConnectionError("e1"), ConnectionError("e2"), ConnectionError("e3")]
        )

        with caplog.at_level(logging.WARNING):
            with pytest.raises(ConnectionError, match="e3"):
                await retrier.execute(operation)

        assert operation.await_count == 3
        # 마지막 실패 뒤에는 대기하지 않음
        assert fake_sleep.calls == [1.0, 2.0]
        assert any(r.getMessage() == "Retry exhausted" for r in caplog.records)

    async def test_timeout_per_attempt(self, fake_sleep):
        """시도마다 타임아웃. 느린 작업은 취소되고 OperationTimeoutError."""
        backoff = LinearBackoff(
            RetryPolicy(max_retries=2, base_delay_ms=10, timeout_ms=20), fake_sleep
        )
        cancelled = []

        async def slow():
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                cancelled.append(True)
                raise

        with pytest.raises(OperationTimeoutError, match="Operation timed out after 20ms"):
            await backoff.execute(slow)

        assert len(cancelled) == 2
        assert fake_sleep.calls == [0.01]

    async def test_policy_override(self, retrier, fake_sleep):
        """호출별 정책 지정."""
        operation = AsyncMock(side_effect=ConnectionError("down"))

        with pytest.raises(ConnectionError):
            await retrier.execute(operation, RetryPolicy(max_retries=1))

        assert operation.await_count == 1
        assert fake_sleep.calls == []

    async def test_concurrent_calls_independent(self, retrier):
        """상태가 없으므로 동시 호출이 서로 영향을 주지 않음."""
        first = AsyncMock(side_effect=[ValueError("x"), "a"])
        second = AsyncMock(return_value="b")

        results = await asyncio.gather(retrier.execute(first), retrier.execute(second))

        assert results == ["a", "b"]
