"""Scan client 예외."""


class ClientError(Exception):
    """모든 클라이언트 예외의 베이스 클래스 (사용자에게 보여줄 메시지 포함)."""

    def __init__(self, message: str = "Something went wrong") -> None:
        self.message = message
        super().__init__(message)


class ImageValidationError(ClientError):
    """이미지 형식/크기 검증 실패."""


class NoImageSelectedError(ClientError):
    def __init__(self) -> None:
        super().__init__("Please upload an image to classify.")


class AuthenticationRequiredError(ClientError):
    def __init__(self) -> None:
        super().__init__("Authentication required")


class ClassificationInProgressError(ClientError):
    """이미 분류 요청이 진행 중."""

    def __init__(self) -> None:
        super().__init__("A classification is already in progress")


class ClassificationFailedError(ClientError):
    """분류 API 호출 실패."""


class ProgressUpdateError(ClientError):
    """진행도 갱신 실패 (non-fatal)."""
