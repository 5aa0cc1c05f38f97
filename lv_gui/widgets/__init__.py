"""Reusable Qt widgets."""

from lv_gui.widgets.log_row import LogRow
from lv_gui.widgets.log_viewer import LogViewer

__all__ = [
    "LogRow",
    "LogViewer",
]
