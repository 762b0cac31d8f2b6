"""Session infrastructure."""

from apps.scan_client.infrastructure.session.static_session_provider import (
    StaticSessionProvider,
)

__all__ = ["StaticSessionProvider"]
