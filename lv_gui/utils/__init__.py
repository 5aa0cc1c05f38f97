"""Qt utilities and helpers."""

from lv_gui.utils.qt import set_widget_role
from lv_gui.utils.formatters import format_datetime, format_timestamp

__all__ = [
    "set_widget_role",
    "format_datetime",
    "format_timestamp",
]
