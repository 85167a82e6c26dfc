"""Timestamp formatting utilities for log and result directory names."""

from datetime import datetime


def now() -> str:
    """Current local time as a sortable directory-safe stamp, e.g. 20251114_123456."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Current local date, e.g. 2025-11-14."""
    return datetime.now().strftime("%Y-%m-%d")
