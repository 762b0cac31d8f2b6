"""Scan 애플리케이션 예외."""

from apps.scan.application.common.exceptions.auth import (
    AuthenticationRequiredError,
    InvalidSessionError,
)
from apps.scan.application.common.exceptions.base import ApplicationError
from apps.scan.application.common.exceptions.upstream import (
    FacilityLookupError,
    PersistenceError,
    UpstreamFailureError,
    UpstreamTimeoutError,
)
from apps.scan.application.common.exceptions.validation import (
    InvalidImageError,
    MissingFieldError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "AuthenticationRequiredError",
    "FacilityLookupError",
    "InvalidImageError",
    "InvalidSessionError",
    "MissingFieldError",
    "PersistenceError",
    "UpstreamFailureError",
    "UpstreamTimeoutError",
    "ValidationError",
]
