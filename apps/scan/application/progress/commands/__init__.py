"""Progress Commands."""

from apps.scan.application.progress.commands.record_classification import (
    RecordClassificationCommand,
    RecordClassificationRequest,
    RecordClassificationResult,
)

__all__ = [
    "RecordClassificationCommand",
    "RecordClassificationRequest",
    "RecordClassificationResult",
]
