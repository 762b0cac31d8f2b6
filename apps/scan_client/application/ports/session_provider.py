"""Session Provider Port."""

from __future__ import annotations

from typing import Protocol

from apps.scan_client.domain import Session


class SessionProvider(Protocol):
    """인증 세션 포트 (opaque capability)."""

    async def get_session(self) -> Session | None:
        """현재 세션. 없으면 None."""
        ...

    async def sign_out(self) -> None:
        ...
