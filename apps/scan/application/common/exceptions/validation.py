"""검증 관련 애플리케이션 예외."""

from apps.scan.application.common.exceptions.base import ApplicationError


class ValidationError(ApplicationError):
    """요청 검증 실패 (400, 재시도 없음)."""


class MissingFieldError(ValidationError):
    """필수 입력 누락."""

    def __init__(self, *fields: str) -> None:
        self.fields = fields
        names = ", ".join(fields) if fields else "required fields"
        super().__init__(f"Missing {names}")


class InvalidImageError(ValidationError):
    """이미지 데이터가 없거나 디코딩 불가."""

    def __init__(self, reason: str = "Image data is missing or not decodable") -> None:
        super().__init__(reason)
