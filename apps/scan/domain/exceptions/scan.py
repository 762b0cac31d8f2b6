"""Scan 도메인 예외."""

from apps.scan.domain.exceptions.base import DomainError


class UnknownWasteCategoryError(DomainError):
    """알 수 없는 폐기물 카테고리."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown waste category: '{value}'")


class ProgressNotFoundError(DomainError):
    """사용자 진행도 레코드 없음."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User progress not found for user_id: {user_id}")
