"""Scan Dependencies - FastAPI Dependency Injection."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, AsyncIterator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from apps.scan.application.catalog.queries import GetCategoriesQuery
from apps.scan.application.classify.commands import ClassifyWasteCommand
from apps.scan.application.classify.ports import VisionLabelerPort
from apps.scan.application.common.exceptions import InvalidSessionError, UpstreamFailureError
from apps.scan.application.facility.ports import PlacesClientPort
from apps.scan.application.facility.queries import FindNearbyFacilitiesQuery
from apps.scan.application.progress.commands import RecordClassificationCommand
from apps.scan.infrastructure.error_handling import LinearBackoff, RetryPolicy
from apps.scan.infrastructure.persistence_postgres import (
    SqlaProgressGateway,
    SqlaTransactionManager,
)
from apps.scan.infrastructure.security import JwtSessionVerifier
from apps.scan.setup.config import Settings, get_settings
from apps.scan.setup.database import get_session_factory

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "

# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_retrier() -> LinearBackoff:
    """Retry 실행기 (설정 기반 기본 정책)."""
    settings = get_settings()
    return LinearBackoff(
        RetryPolicy(
            max_retries=settings.retry_max_retries,
            base_delay_ms=settings.retry_base_delay_ms,
            timeout_ms=settings.retry_timeout_ms,
        )
    )


@lru_cache
def get_vision_client() -> VisionLabelerPort | None:
    """Vision 클라이언트 싱글톤. API key가 없으면 None."""
    settings = get_settings()
    if settings.google_vision_api_key is None:
        logger.warning("GOOGLE_VISION_API_KEY not set, classification disabled")
        return None

    from apps.scan.infrastructure.integrations.google import GoogleVisionHttpClient

    logger.info("Google Vision HTTP client created")
    return GoogleVisionHttpClient(
        api_key=settings.google_vision_api_key.get_secret_value(),
        timeout=settings.vision_timeout,
        max_results=settings.vision_max_labels,
    )


@lru_cache
def get_places_client() -> PlacesClientPort | None:
    """Places 클라이언트 싱글톤. API key가 없으면 None (시설 조회 생략)."""
    settings = get_settings()
    if settings.google_maps_api_key is None:
        logger.warning("GOOGLE_MAPS_API_KEY not set, facility lookup disabled")
        return None

    from apps.scan.infrastructure.integrations.google import GooglePlacesHttpClient

    logger.info("Google Places HTTP client created")
    return GooglePlacesHttpClient(
        api_key=settings.google_maps_api_key.get_secret_value(),
        timeout=settings.places_timeout,
    )


@lru_cache
def get_session_verifier() -> JwtSessionVerifier | None:
    """세션 검증기 싱글톤. 서명 키가 없으면 None."""
    settings = get_settings()
    if settings.session_jwt_secret is None:
        return None
    return JwtSessionVerifier(
        secret_key=settings.session_jwt_secret.get_secret_value(),
        audience=settings.session_jwt_audience,
    )


async def close_clients() -> None:
    """외부 HTTP 클라이언트 정리 (shutdown)."""
    for client in (get_vision_client(), get_places_client()):
        if client is not None:
            await client.close()


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """DB 세션을 주입합니다."""
    async with get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.close()


# ─────────────────────────────────────────────────────────────────────────────
# Session
# ─────────────────────────────────────────────────────────────────────────────


def get_session_user_id(
    settings: Annotated[Settings, Depends(get_settings)],
    verifier: Annotated[JwtSessionVerifier | None, Depends(get_session_verifier)],
    authorization: str | None = Header(None),
) -> str | None:
    """Authorization 헤더의 세션 토큰을 검증해 사용자 ID를 반환합니다.

    Returns:
        세션 사용자 ID. 헤더가 없거나 인증이 비활성화된 경우 None.

    Raises:
        InvalidSessionError: 토큰이 유효하지 않은 경우 (403)
    """
    if settings.auth_disabled:
        return None
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        return None

    if verifier is None:
        logger.error("Session secret not configured, rejecting token")
        raise InvalidSessionError("Session verification is not configured")
    return verifier.verify(token)


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands / Queries)
# ─────────────────────────────────────────────────────────────────────────────


def get_facility_query() -> FindNearbyFacilitiesQuery:
    """FindNearbyFacilitiesQuery 인스턴스 반환."""
    settings = get_settings()
    return FindNearbyFacilitiesQuery(
        places_client=get_places_client(),
        radius=settings.facility_search_radius_m,
        limit=settings.facility_result_limit,
    )


def get_classify_command(
    facility_query: Annotated[FindNearbyFacilitiesQuery, Depends(get_facility_query)],
) -> ClassifyWasteCommand:
    """ClassifyWasteCommand 인스턴스 반환."""
    vision = get_vision_client()
    if vision is None:
        raise UpstreamFailureError("Image classification is not configured")
    return ClassifyWasteCommand(
        vision=vision,
        facility_query=facility_query,
        retrier=get_retrier(),
    )


def get_record_command(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> RecordClassificationCommand:
    """RecordClassificationCommand 인스턴스 반환."""
    return RecordClassificationCommand(
        gateway=SqlaProgressGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_categories_query() -> GetCategoriesQuery:
    """GetCategoriesQuery 인스턴스 반환."""
    return GetCategoriesQuery()


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionUserIdDep = Annotated[str | None, Depends(get_session_user_id)]
ClassifyCommandDep = Annotated[ClassifyWasteCommand, Depends(get_classify_command)]
RecordCommandDep = Annotated[RecordClassificationCommand, Depends(get_record_command)]
GetCategoriesQueryDep = Annotated[GetCategoriesQuery, Depends(get_categories_query)]
