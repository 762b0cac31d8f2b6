"""Scan API Main Application.

폐기물 이미지 분류 → 주변 시설 → 진행도 갱신 API.
저장소 연결 확인은 import 시점이 아니라 lifespan에서 명시적으로 실행합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.scan.infrastructure.persistence_postgres import check_store_connection
from apps.scan.presentation.http.controllers import (
    classify_router,
    health_router,
    progress_router,
)
from apps.scan.presentation.http.errors import register_exception_handlers
from apps.scan.setup.config import get_settings
from apps.scan.setup.database import get_session_factory
from apps.scan.setup.dependencies import close_clients, get_retrier
from apps.scan.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()

CORS_METHODS = ["GET", "POST", "OPTIONS", "PUT", "PATCH", "DELETE"]
CORS_HEADERS = ["Authorization", "Content-Type", "Accept", "X-Requested-With"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """FastAPI 라이프스팬 이벤트."""
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")

    if settings.startup_health_check:
        try:
            await check_store_connection(get_session_factory(), get_retrier())
        except Exception as e:
            # 연결 실패는 기록만 하고 기동은 계속한다 (/ready 가 503 반환)
            logger.error("Store: failed to initialize connection: %s", e)

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_clients()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성."""
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Scan API",
        description="Waste image classification, nearby facilities and recycling rewards",
        version=settings.service_version,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(classify_router, prefix="/api")
    app.include_router(progress_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.scan.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "dev",
    )
