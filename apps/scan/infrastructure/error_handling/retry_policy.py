"""Retry Policy - 타임아웃 + 선형 백오프 재시도.

알고리즘:
- 각 시도는 operation()과 타이머를 경쟁시킴 (asyncio.wait_for, 패자는 취소)
- 실패 시 base_delay * attempt(1부터) 만큼 대기 후 재시도 (선형, 지터 없음)
- max_retries번 연속 실패하면 마지막 예외를 그대로 전파

상태를 보관하지 않으므로 동시 호출에 안전합니다.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


class OperationTimeoutError(TimeoutError):
    """단일 시도가 per_attempt_timeout을 초과함."""

    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(f"Operation timed out after {timeout_ms}ms")


@dataclass(frozen=True)
class RetryPolicy:
    """재시도 정책 설정 (밀리초 단위)."""

    max_retries: int = 3
    base_delay_ms: int = 1000
    timeout_ms: int = 20000

    def __post_init__(self) -> None:
        if self.max_retries < 1:
            raise ValueError("max_retries must be >= 1")
        if self.base_delay_ms < 0 or self.timeout_ms <= 0:
            raise ValueError("base_delay_ms must be >= 0 and timeout_ms > 0")


class LinearBackoff:
    """선형 백오프 재시도 실행기."""

    def __init__(self, policy: RetryPolicy | None = None, sleep: Sleep | None = None) -> None:
        """초기화.

        Args:
            policy: 기본 재시도 정책 (None이면 기본값)
            sleep: 대기 함수 (테스트에서 가짜 시계 주입용)
        """
        self._policy = policy or RetryPolicy()
        self._sleep = sleep or asyncio.sleep

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def calculate_delay(self, attempt: int, policy: RetryPolicy | None = None) -> float:
        """재시도 지연 시간 (초). attempt는 1부터 시작."""
        policy = policy or self._policy
        return policy.base_delay_ms * attempt / 1000

    async def _attempt(self, operation: Callable[[], Awaitable[T]], timeout_ms: int) -> T:
        try:
            return await asyncio.wait_for(operation(), timeout=timeout_ms / 1000)
        except asyncio.TimeoutError as e:
            raise OperationTimeoutError(timeout_ms) from e

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        policy: RetryPolicy | None = None,
    ) -> T:
        """재시도 로직과 함께 operation 실행.

        Args:
            operation: 인자 없는 async 함수
            policy: 이번 호출에만 적용할 정책 (None이면 기본 정책)

        Returns:
            operation 결과

        Raises:
            마지막 시도의 예외 (재시도 모두 실패 시)
        """
        policy = policy or self._policy

        for attempt in range(1, policy.max_retries + 1):
            try:
                return await self._attempt(operation, policy.timeout_ms)
            except Exception as e:
                if attempt >= policy.max_retries:
                    logger.error(
                        "Retry exhausted",
                        extra={
                            "attempts": attempt,
                            "error_type": type(e).__name__,
                            "error": str(e),
                        },
                    )
                    raise

                delay = self.calculate_delay(attempt, policy)
                logger.warning(
                    "Retry %d/%d after error: %s",
                    attempt,
                    policy.max_retries,
                    e,
                    extra={"attempt": attempt, "delay_seconds": delay},
                )
                await self._sleep(delay)

        raise RuntimeError("Unexpected retry state")
