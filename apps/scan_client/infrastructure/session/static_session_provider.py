"""Static session provider (스크립트/CLI용)."""

from __future__ import annotations

from apps.scan_client.domain import Session


class StaticSessionProvider:
    """미리 발급받은 access token으로 동작하는 세션 제공자."""

    def __init__(self, session: Session | None = None) -> None:
        self._session = session

    async def get_session(self) -> Session | None:
        return self._session

    async def sign_out(self) -> None:
        self._session = None
