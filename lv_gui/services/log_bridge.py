"""Forward stdlib logging records into a log viewer."""

from __future__ import annotations

import contextlib
import logging
from datetime import datetime
from typing import Iterator, Protocol

from lv_gui.models.log_record import LogRecord
from lv_gui.models.severity import Severity, severity_from_level


class LogSink(Protocol):
    """Anything accepting entries the way ``LogViewer`` does."""

    def add_log_entry(self, record: LogRecord, severity: Severity) -> None: ...


class LogViewerHandler(logging.Handler):
    """Logging handler that appends each record to a viewer.

    ``emit`` runs on whichever thread logged; the viewer's entry point does
    the hand-off to the UI thread.
    """

    def __init__(self, sink: LogSink, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._sink = sink
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogRecord(
                message=self.format(record),
                timestamp=datetime.fromtimestamp(record.created),
            )
            self._sink.add_log_entry(entry, severity_from_level(record.levelno))
        except Exception:
            self.handleError(record)


def attach_viewer_handler(
    logger: logging.Logger,
    sink: LogSink,
    *,
    level: int = logging.NOTSET,
) -> LogViewerHandler:
    """Attach a viewer handler to the provided logger."""
    handler = LogViewerHandler(sink, level)
    logger.addHandler(handler)
    return handler


@contextlib.contextmanager
def capture_logs(
    sink: LogSink,
    logger_names: list[str | None] | None = None,
    *,
    level: int = logging.NOTSET,
) -> Iterator[list[LogViewerHandler]]:
    """Show records from ``logger_names`` in ``sink`` for the duration of a block."""
    names = logger_names if logger_names is not None else [None]
    attached: list[tuple[logging.Logger, LogViewerHandler]] = []
    for name in names:
        target = logging.getLogger(name)
        attached.append((target, attach_viewer_handler(target, sink, level=level)))
    try:
        yield [handler for _, handler in attached]
    finally:
        for target, handler in attached:
            target.removeHandler(handler)
