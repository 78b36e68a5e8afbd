"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class ReportFormat(str, Enum):
    """Output formats for validation reports.

    Values are lowercase strings to ease CLI interchange.
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


__all__ = ["ReportFormat"]
