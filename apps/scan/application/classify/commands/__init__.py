"""Classify Commands."""

from apps.scan.application.classify.commands.classify_waste import (
    ClassifyWasteCommand,
    ClassifyWasteRequest,
)

__all__ = ["ClassifyWasteCommand", "ClassifyWasteRequest"]
