"""Scan Client Configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Scan 클라이언트 설정."""

    api_base_url: str = Field("http://localhost:8000", description="Scan API base URL")
    request_timeout: float = Field(30.0, gt=0, description="HTTP timeout (seconds)")
    max_image_bytes: int = Field(5 * 1024 * 1024, ge=1, description="Max upload size")
    allowed_content_types_str: str = Field(
        "image/jpeg,image/png,image/jpg",
        description="Allowed MIME types (콤마 구분)",
    )

    @property
    def allowed_content_types(self) -> frozenset[str]:
        types = self.allowed_content_types_str.split(",")
        return frozenset(t.strip().lower() for t in types if t.strip())

    model_config = SettingsConfigDict(
        env_prefix="SCAN_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_client_settings() -> ClientSettings:
    """캐시된 ClientSettings 인스턴스 반환."""
    return ClientSettings()
