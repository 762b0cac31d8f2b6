"""인증 관련 애플리케이션 예외."""

from apps.scan.application.common.exceptions.base import ApplicationError


class AuthenticationRequiredError(ApplicationError):
    """세션 없음 (401)."""

    def __init__(self, reason: str = "Authentication required") -> None:
        super().__init__(reason)


class InvalidSessionError(ApplicationError):
    """세션 토큰이 유효하지 않거나 요청 사용자와 불일치 (403)."""

    def __init__(self, reason: str = "Invalid or expired session") -> None:
        super().__init__(reason)
