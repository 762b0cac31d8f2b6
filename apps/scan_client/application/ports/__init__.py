"""Scan client ports."""

from apps.scan_client.application.ports.scan_api import ScanApi
from apps.scan_client.application.ports.session_provider import SessionProvider

__all__ = ["ScanApi", "SessionProvider"]
