"""Scan 도메인 예외."""

from apps.scan.domain.exceptions.base import DomainError
from apps.scan.domain.exceptions.scan import ProgressNotFoundError, UnknownWasteCategoryError

__all__ = [
    "DomainError",
    "ProgressNotFoundError",
    "UnknownWasteCategoryError",
]
