"""Health Check Controller."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from apps.scan.infrastructure.error_handling import RetryPolicy
from apps.scan.infrastructure.persistence_postgres import check_store_connection
from apps.scan.setup.config import get_settings
from apps.scan.setup.database import get_session_factory
from apps.scan.setup.dependencies import get_retrier

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)

READY_PROBE_POLICY = RetryPolicy(max_retries=1, base_delay_ms=0, timeout_ms=5000)


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크."""
    settings = get_settings()
    return {"status": "ok", "service": settings.service_name, "version": settings.service_version}


@router.get("/ready")
async def ready() -> JSONResponse:
    """서비스 준비 상태 체크 (저장소 연결)."""
    try:
        await check_store_connection(get_session_factory(), get_retrier(), READY_PROBE_POLICY)
    except Exception as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return JSONResponse(status_code=200, content={"status": "ready"})
