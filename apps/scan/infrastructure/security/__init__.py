"""Security infrastructure."""

from apps.scan.infrastructure.security.session_verifier import JwtSessionVerifier

__all__ = ["JwtSessionVerifier"]
