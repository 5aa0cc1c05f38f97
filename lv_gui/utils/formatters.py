"""Formatting helpers for GUI display."""

from __future__ import annotations

from datetime import datetime


def format_timestamp(value: datetime | None) -> str:
    """Format a log entry timestamp for its row."""
    if value is None:
        return "--:--:--"
    return value.strftime("%H:%M:%S.") + f"{value.microsecond // 1000:03d}"


def format_datetime(value: datetime | None) -> str:
    """Format a datetime for tooltips."""
    if value is None:
        return "Unknown"
    return value.strftime("%Y-%m-%d %H:%M:%S")
