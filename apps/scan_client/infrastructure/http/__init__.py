"""HTTP infrastructure."""

from apps.scan_client.infrastructure.http.scan_api_client import ScanApiHttpClient

__all__ = ["ScanApiHttpClient"]
