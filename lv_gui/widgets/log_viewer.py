"""Log viewer widget for streaming output."""

from __future__ import annotations

import logging

from PySide6.QtCore import QModelIndex, Qt, Signal, Slot
from PySide6.QtWidgets import QFrame, QScrollArea, QVBoxLayout, QWidget

from lv_gui.adapters.scroll_surface import ScrollBarSurface
from lv_gui.models.log_record import LogRecord
from lv_gui.models.severity import Severity
from lv_gui.services.log_stream import AppendOnlyLogStream
from lv_gui.viewmodels.autoscroll_vm import AutoScrollController, ScrollChange
from lv_gui.widgets.log_row import LogRow

logger = logging.getLogger(__name__)


class LogViewer(QWidget):
    """Scrolling, color-coded view over an append-only log stream.

    ``add_log_entry`` and ``clear_all_logs`` are the only ways to change
    what is shown and may be called from any thread. Rows follow the
    stream's insert and reset notifications on the UI thread, and the view
    stays on the newest entry until the user scrolls away from the bottom.
    """

    entry_count_changed = Signal(int)
    pinned_changed = Signal(bool)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("logViewer")
        self._rows: list[LogRow] = []

        self._stream = AppendOnlyLogStream(self)
        self._autoscroll = AutoScrollController(
            on_error=self._report_scroll_error,
            on_pinned_changed=self.pinned_changed.emit,
        )

        self._setup_ui()
        self._surface = ScrollBarSurface(
            self._scroll_area.verticalScrollBar(),
            self,
            viewport=self._scroll_area.viewport(),
        )
        self._connect_signals()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._scroll_area = QScrollArea()
        self._scroll_area.setObjectName("logScrollArea")
        self._scroll_area.setWidgetResizable(True)
        self._scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self._scroll_area.setHorizontalScrollBarPolicy(
            Qt.ScrollBarPolicy.ScrollBarAlwaysOff
        )

        self._content = QWidget()
        self._content.setObjectName("logContent")
        self._rows_layout = QVBoxLayout(self._content)
        self._rows_layout.setContentsMargins(6, 4, 6, 4)
        self._rows_layout.setSpacing(1)
        self._rows_layout.addStretch(1)

        self._scroll_area.setWidget(self._content)
        layout.addWidget(self._scroll_area)

    def _connect_signals(self) -> None:
        self._stream.rowsInserted.connect(self._on_rows_inserted)
        self._stream.modelReset.connect(self._on_model_reset)
        self._stream.count_changed.connect(self.entry_count_changed)
        self._surface.scroll_changed.connect(self._on_scroll_changed)

    # Public API (any thread)

    def add_log_entry(self, record: LogRecord, severity: Severity) -> None:
        """Color ``record`` for ``severity`` and queue it for display."""
        record.apply_severity(severity)
        self._stream.append(record)

    def clear_all_logs(self) -> None:
        """Queue removal of every entry."""
        self._stream.clear()

    # Read-only accessors (UI thread)

    @property
    def stream(self) -> AppendOnlyLogStream:
        return self._stream

    @property
    def autoscroll(self) -> AutoScrollController:
        return self._autoscroll

    @property
    def surface(self) -> ScrollBarSurface:
        return self._surface

    def row_count(self) -> int:
        return len(self._rows)

    def rows(self) -> tuple[LogRow, ...]:
        return tuple(self._rows)

    # Stream notifications

    @Slot(QModelIndex, int, int)
    def _on_rows_inserted(self, _parent: QModelIndex, first: int, last: int) -> None:
        for row in range(first, last + 1):
            self._insert_row(row, self._stream.record_at(row))

    @Slot()
    def _on_model_reset(self) -> None:
        for row in self._rows:
            row.detach()
            self._rows_layout.removeWidget(row)
            row.deleteLater()
        self._rows = []
        for index, record in enumerate(self._stream.records()):
            self._insert_row(index, record)

    def _insert_row(self, index: int, record: LogRecord) -> None:
        row = LogRow(record, self._content)
        self._rows.insert(index, row)
        self._rows_layout.insertWidget(index, row)

    # Scrolling

    @Slot(object)
    def _on_scroll_changed(self, change: ScrollChange) -> None:
        self._autoscroll.on_scroll_changed(change, self._surface)

    def _report_scroll_error(self, exc: Exception) -> None:
        self.add_log_entry(LogRecord.error(str(exc)), Severity.ERROR)
