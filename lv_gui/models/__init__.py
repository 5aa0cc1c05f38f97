"""Log entry models."""

from lv_gui.models.log_record import APPLICATION_ERROR_PREFIX, LogRecord
from lv_gui.models.notifier import ChangeNotifier
from lv_gui.models.severity import (
    SEVERITY_PALETTE,
    Severity,
    severity_color,
    severity_from_level,
)

__all__ = [
    "APPLICATION_ERROR_PREFIX",
    "ChangeNotifier",
    "LogRecord",
    "SEVERITY_PALETTE",
    "Severity",
    "severity_color",
    "severity_from_level",
]
