"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.scan.application.common.exceptions import (
    ApplicationError,
    AuthenticationRequiredError,
    InvalidImageError,
    InvalidSessionError,
    MissingFieldError,
    PersistenceError,
    UpstreamFailureError,
    UpstreamTimeoutError,
    ValidationError,
)
from apps.scan.domain.exceptions import DomainError, UnknownWasteCategoryError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: object, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message, "code": code})


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        fields = sorted(
            {str(err["loc"][-1]) for err in exc.errors() if err.get("loc") and len(err["loc"]) > 1}
        )
        message = f"Invalid or missing fields: {', '.join(fields)}" if fields else "Invalid request"
        return _error(400, message, "INVALID_REQUEST")

    @app.exception_handler(AuthenticationRequiredError)
    async def authentication_required_handler(request: Request, exc: AuthenticationRequiredError):
        return _error(401, exc.message, "AUTHENTICATION_REQUIRED")

    @app.exception_handler(InvalidSessionError)
    async def invalid_session_handler(request: Request, exc: InvalidSessionError):
        return _error(403, exc.message, "INVALID_SESSION")

    @app.exception_handler(InvalidImageError)
    async def invalid_image_handler(request: Request, exc: InvalidImageError):
        return _error(400, exc.message, "INVALID_IMAGE")

    @app.exception_handler(MissingFieldError)
    async def missing_field_handler(request: Request, exc: MissingFieldError):
        return _error(400, exc.message, "MISSING_FIELD")

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return _error(400, exc.message, "VALIDATION_ERROR")

    @app.exception_handler(UpstreamTimeoutError)
    async def upstream_timeout_handler(request: Request, exc: UpstreamTimeoutError):
        return _error(500, exc.message, "UPSTREAM_TIMEOUT")

    @app.exception_handler(UpstreamFailureError)
    async def upstream_failure_handler(request: Request, exc: UpstreamFailureError):
        return _error(500, exc.message, "UPSTREAM_FAILURE")

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError):
        logger.error("Persistence failure: %s", exc.message, extra={"path": request.url.path})
        return _error(500, exc.message, "PERSISTENCE_ERROR")

    @app.exception_handler(UnknownWasteCategoryError)
    async def unknown_category_handler(request: Request, exc: UnknownWasteCategoryError):
        return _error(400, exc.message, "UNKNOWN_WASTE_CATEGORY")

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error(400, exc.message, "DOMAIN_ERROR")

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error(400, exc.message, "APPLICATION_ERROR")
