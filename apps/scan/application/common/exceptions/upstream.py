"""외부 연동/저장소 관련 애플리케이션 예외."""

from apps.scan.application.common.exceptions.base import ApplicationError


class UpstreamFailureError(ApplicationError):
    """Vision 호출이 재시도 후에도 실패 (요청 전체 실패)."""

    def __init__(self, reason: str = "Failed to classify image") -> None:
        super().__init__(reason)


class UpstreamTimeoutError(UpstreamFailureError):
    """Vision 호출이 매 시도 타임아웃."""

    def __init__(self, reason: str = "Image classification timed out") -> None:
        super().__init__(reason)


class FacilityLookupError(ApplicationError):
    """Places 조회 실패. FindNearbyFacilitiesQuery 안에서 항상 흡수됩니다."""

    def __init__(self, reason: str = "Facility lookup failed") -> None:
        super().__init__(reason)


class PersistenceError(ApplicationError):
    """진행도/이벤트 저장 실패."""

    def __init__(self, reason: str = "Failed to update progress") -> None:
        super().__init__(reason)
