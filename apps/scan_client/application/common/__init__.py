"""Scan client application common."""

from apps.scan_client.application.common.exceptions import (
    AuthenticationRequiredError,
    ClassificationFailedError,
    ClassificationInProgressError,
    ClientError,
    ImageValidationError,
    NoImageSelectedError,
    ProgressUpdateError,
)

__all__ = [
    "AuthenticationRequiredError",
    "ClassificationFailedError",
    "ClassificationInProgressError",
    "ClientError",
    "ImageValidationError",
    "NoImageSelectedError",
    "ProgressUpdateError",
]
