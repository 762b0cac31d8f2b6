"""Progress HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RecordProgressBody(BaseModel):
    """진행도 갱신 요청 스키마."""

    user_id: str = Field(..., alias="userId", min_length=1)
    waste_type: str = Field(..., alias="wasteType", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class RecordProgressResponse(BaseModel):
    """진행도 갱신 응답 스키마."""

    points: int
    badges: list[str]
    newly_awarded_badge: str | None = Field(None, alias="newlyAwardedBadge")

    model_config = ConfigDict(populate_by_name=True)
