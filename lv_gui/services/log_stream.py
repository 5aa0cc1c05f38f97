"""Append-only stream of log records owned by the UI thread."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from PySide6.QtCore import (
    QAbstractListModel,
    QModelIndex,
    QObject,
    QPersistentModelIndex,
    Qt,
    Signal,
    Slot,
)
from PySide6.QtGui import QColor

from lv_gui.models.log_record import LogRecord
from lv_gui.utils.formatters import format_datetime

logger = logging.getLogger(__name__)

_DISPLAY_ROLE = int(Qt.ItemDataRole.DisplayRole)
_FOREGROUND_ROLE = int(Qt.ItemDataRole.ForegroundRole)
_TOOLTIP_ROLE = int(Qt.ItemDataRole.ToolTipRole)

TimestampRole = int(Qt.ItemDataRole.UserRole) + 1
RecordRole = int(Qt.ItemDataRole.UserRole) + 2


class StreamOp(str, Enum):
    APPEND = "append"
    CLEAR = "clear"


@dataclass(frozen=True)
class StreamMessage:
    """A mutation request sent from a producer to the stream's owner."""

    op: StreamOp
    record: LogRecord | None = None


class AppendOnlyLogStream(QAbstractListModel):
    """Ordered log records, mutated only by the thread that owns the model.

    ``append`` and ``clear`` may be called from any thread. They send a
    ``StreamMessage`` over a queued connection and return at once; the
    owning thread applies messages in arrival order, so messages sent by a
    single thread keep their order. Row insertion and model reset are the
    collection-changed notifications views react to.
    """

    count_changed = Signal(int)
    _message_posted = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._records: list[LogRecord] = []
        self._message_posted.connect(
            self._apply, type=Qt.ConnectionType.QueuedConnection
        )

    # Producer side (any thread)

    def append(self, record: LogRecord) -> None:
        """Queue ``record`` for the tail of the stream."""
        self._message_posted.emit(StreamMessage(StreamOp.APPEND, record))

    def clear(self) -> None:
        """Queue removal of every record."""
        self._message_posted.emit(StreamMessage(StreamOp.CLEAR))

    # Owner side (UI thread)

    @Slot(object)
    def _apply(self, message: StreamMessage) -> None:
        if message.op is StreamOp.APPEND:
            row = len(self._records)
            self.beginInsertRows(QModelIndex(), row, row)
            self._records.append(message.record)
            self.endInsertRows()
        else:
            self.beginResetModel()
            self._records = []
            self.endResetModel()
            logger.debug("Log stream cleared")
        self.count_changed.emit(len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def records(self) -> tuple[LogRecord, ...]:
        """Snapshot of the current records in display order."""
        return tuple(self._records)

    def record_at(self, row: int) -> LogRecord:
        return self._records[row]

    def rowCount(
        self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()
    ) -> int:
        if parent.isValid():
            return 0
        return len(self._records)

    def data(
        self,
        index: QModelIndex | QPersistentModelIndex,
        role: int = _DISPLAY_ROLE,
    ) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._records):
            return None
        record = self._records[index.row()]
        role = int(role)
        if role == _DISPLAY_ROLE:
            return record.message
        if role == _FOREGROUND_ROLE:
            return QColor(record.color) if record.color else None
        if role == _TOOLTIP_ROLE:
            return format_datetime(record.timestamp)
        if role == TimestampRole:
            return record.timestamp
        if role == RecordRole:
            return record
        return None
