"""Catalog HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel


class WasteCategoryItem(BaseModel):
    """카테고리 안내 스키마."""

    name: str
    keywords: list[str]
    instructions: str
    tip: str
    facility_keyword: str
