"""One rendered line of the log viewer."""

from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from lv_gui.adapters.selectable_text import SelectableLabel
from lv_gui.models.log_record import LogRecord
from lv_gui.utils import format_datetime, format_timestamp, set_widget_role


class LogRow(QWidget):
    """Timestamp plus selectable message, colored by the record's severity."""

    def __init__(self, record: LogRecord, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._record = record

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._time_label = QLabel(format_timestamp(record.timestamp))
        self._time_label.setToolTip(format_datetime(record.timestamp))
        set_widget_role(self._time_label, "muted")
        layout.addWidget(self._time_label)

        self._message_label = SelectableLabel(record.message)
        self._message_label.setWordWrap(True)
        layout.addWidget(self._message_label, 1)

        self._apply_color()
        record.add_observer(self._on_record_changed)

    @property
    def record(self) -> LogRecord:
        return self._record

    @property
    def message_label(self) -> SelectableLabel:
        return self._message_label

    def detach(self) -> None:
        """Stop following the record before the row is discarded."""
        self._record.remove_observer(self._on_record_changed)

    def _on_record_changed(self, _record: LogRecord, name: str) -> None:
        if name == "color":
            self._apply_color()

    def _apply_color(self) -> None:
        color = self._record.color
        self._message_label.setStyleSheet(f"color: {color};" if color else "")
