"""Catalog Queries."""

from apps.scan.application.catalog.queries.get_categories import (
    GetCategoriesQuery,
    WasteCategoryInfo,
)

__all__ = ["GetCategoriesQuery", "WasteCategoryInfo"]
