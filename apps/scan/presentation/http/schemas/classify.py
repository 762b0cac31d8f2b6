"""Classify HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserLocation(BaseModel):
    """사용자 위치."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class ClassifyWasteBody(BaseModel):
    """분류 요청 스키마."""

    image_base64: str = Field(..., alias="imageBase64", min_length=1)
    user_id: str = Field(..., alias="userId", min_length=1)
    user_location: UserLocation | None = Field(None, alias="userLocation")

    model_config = ConfigDict(populate_by_name=True)


class LocationItem(BaseModel):
    """주변 시설 스키마."""

    name: str
    address: str
    rating: float | str


class ClassifyWasteResponse(BaseModel):
    """분류 응답 스키마."""

    labels: list[str]
    waste_type: str = Field(..., alias="wasteType")
    locations: list[LocationItem]
    instructions: str
    tip: str

    model_config = ConfigDict(populate_by_name=True)
