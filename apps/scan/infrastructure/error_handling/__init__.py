"""Error Handling Infrastructure."""

from apps.scan.infrastructure.error_handling.retry_policy import (
    LinearBackoff,
    OperationTimeoutError,
    RetryPolicy,
)

__all__ = ["LinearBackoff", "OperationTimeoutError", "RetryPolicy"]
