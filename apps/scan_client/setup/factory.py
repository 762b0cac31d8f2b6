"""Scan client factory."""

from __future__ import annotations

from typing import Callable

from apps.scan_client.application import UploadOrchestrator
from apps.scan_client.application.ports import SessionProvider
from apps.scan_client.infrastructure.http import ScanApiHttpClient
from apps.scan_client.setup.config import ClientSettings, get_client_settings


def create_orchestrator(
    session_provider: SessionProvider,
    settings: ClientSettings | None = None,
    on_auth_required: Callable[[], None] | None = None,
) -> UploadOrchestrator:
    """설정 기반 UploadOrchestrator 생성."""
    settings = settings or get_client_settings()
    api = ScanApiHttpClient(base_url=settings.api_base_url, timeout=settings.request_timeout)
    return UploadOrchestrator(
        session_provider,
        api,
        max_image_bytes=settings.max_image_bytes,
        allowed_content_types=settings.allowed_content_types,
        on_auth_required=on_auth_required,
    )
