"""Unit tests for the logging bridge."""

from __future__ import annotations

import logging
import threading
from datetime import datetime

import pytest

from lv_gui.models.log_record import LogRecord
from lv_gui.models.severity import Severity
from lv_gui.services.log_bridge import (
    LogViewerHandler,
    attach_viewer_handler,
    capture_logs,
)

pytestmark = pytest.mark.unit_gui


class RecordingSink:
    def __init__(self) -> None:
        self.entries: list[tuple[LogRecord, Severity]] = []
        self._lock = threading.Lock()

    def add_log_entry(self, record: LogRecord, severity: Severity) -> None:
        with self._lock:
            self.entries.append((record, severity))


class BrokenSink:
    def add_log_entry(self, record: LogRecord, severity: Severity) -> None:
        raise RuntimeError("sink closed")


@pytest.fixture
def bridge_logger():
    logger = logging.getLogger("tests.lv_gui.bridge")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    logger.handlers.clear()


def test_handler_maps_levels_and_timestamps(bridge_logger) -> None:
    sink = RecordingSink()
    attach_viewer_handler(bridge_logger, sink)

    bridge_logger.debug("resolving %s", "deps")
    bridge_logger.info("compiling")
    bridge_logger.warning("slow step")
    bridge_logger.critical("out of disk")

    assert [(r.message, s) for r, s in sink.entries] == [
        ("resolving deps", Severity.DEBUG),
        ("compiling", Severity.INFO),
        ("slow step", Severity.WARNING),
        ("out of disk", Severity.ERROR),
    ]
    assert all(isinstance(r.timestamp, datetime) for r, _ in sink.entries)


def test_handler_level_filters(bridge_logger) -> None:
    sink = RecordingSink()
    attach_viewer_handler(bridge_logger, sink, level=logging.WARNING)

    bridge_logger.info("hidden")
    bridge_logger.error("shown")

    assert [r.message for r, _ in sink.entries] == ["shown"]


def test_capture_logs_detaches_afterwards(bridge_logger) -> None:
    sink = RecordingSink()

    with capture_logs(sink, [bridge_logger.name]) as handlers:
        assert len(handlers) == 1
        assert handlers[0] in bridge_logger.handlers
        bridge_logger.info("inside")
    bridge_logger.info("outside")

    assert [r.message for r, _ in sink.entries] == ["inside"]
    assert not any(isinstance(h, LogViewerHandler) for h in bridge_logger.handlers)


def test_sink_failures_go_to_handle_error(bridge_logger, monkeypatch) -> None:
    handler = attach_viewer_handler(bridge_logger, BrokenSink())
    failures: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", failures.append)

    bridge_logger.error("lost")

    assert len(failures) == 1
