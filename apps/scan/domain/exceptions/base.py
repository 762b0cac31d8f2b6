"""도메인 예외 베이스 클래스."""


class DomainError(Exception):
    """폐기물 분류/진행도 규칙 위반.

    HTTP 계층에서 400 응답으로 변환됩니다.
    """

    def __init__(self, message: str = "Invalid scan domain state") -> None:
        self.message = message
        super().__init__(message)
