"""Qt helper utilities."""

from __future__ import annotations

from PySide6.QtWidgets import QWidget


def set_widget_role(widget: QWidget, role: str | None) -> None:
    """Set a role dynamic property and refresh style."""
    widget.setProperty("role", role)
    widget.style().unpolish(widget)
    widget.style().polish(widget)
