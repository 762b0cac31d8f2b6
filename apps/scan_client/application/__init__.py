"""Scan client application layer."""

from apps.scan_client.application.upload_orchestrator import UploadOrchestrator

__all__ = ["UploadOrchestrator"]
