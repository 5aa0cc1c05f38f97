"""Log severities and their display colors."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class Severity(str, Enum):
    """Severity attached to a log entry by its producer."""

    INFO = "info"
    DEBUG = "debug"
    WARNING = "warning"
    ERROR = "error"


WHITE_SMOKE: Final[str] = "#F5F5F5"
AQUA: Final[str] = "#00FFFF"
GOLD: Final[str] = "#FFD700"
RED: Final[str] = "#FF0000"

SEVERITY_PALETTE: Final[Mapping[Severity, str]] = MappingProxyType(
    {
        Severity.INFO: WHITE_SMOKE,
        Severity.DEBUG: AQUA,
        Severity.WARNING: GOLD,
        Severity.ERROR: RED,
    }
)


def severity_color(severity: Severity) -> str:
    """Return the display color for a severity."""
    return SEVERITY_PALETTE[Severity(severity)]


def severity_from_level(levelno: int) -> Severity:
    """Map a stdlib logging level onto a severity."""
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno >= logging.INFO:
        return Severity.INFO
    return Severity.DEBUG


__all__ = [
    "Severity",
    "SEVERITY_PALETTE",
    "severity_color",
    "severity_from_level",
]
