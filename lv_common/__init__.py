"""Shared helpers for the live log viewer."""

from lv_common.errors import (
    CapabilityBindingError,
    DispatcherUnavailableError,
    LVError,
    wrap_error,
)
from lv_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "LVError",
    "CapabilityBindingError",
    "DispatcherUnavailableError",
    "wrap_error",
]
