"""Unit tests for DemoLogWorker."""

from __future__ import annotations

import threading

import pytest

from lv_gui.models.log_record import LogRecord
from lv_gui.models.severity import Severity
from lv_gui.workers.demo_worker import DemoLogWorker
from tests.helpers.qt import process_events

pytestmark = pytest.mark.unit_gui


class RecordingSink:
    def __init__(self) -> None:
        self.entries: list[tuple[LogRecord, Severity]] = []
        self.clears = 0
        self.threads: set[int] = set()
        self._lock = threading.Lock()

    def add_log_entry(self, record: LogRecord, severity: Severity) -> None:
        with self._lock:
            self.entries.append((record, severity))
            self.threads.add(threading.get_ident())

    def clear_all_logs(self) -> None:
        self.clears += 1


def test_produce_cycles_severities(qapp) -> None:
    sink = RecordingSink()
    worker = DemoLogWorker(sink, lines=7, interval_ms=0, clear_first=True)

    worker._produce()

    assert worker.produced == 7
    assert sink.clears == 1
    assert [s for _, s in sink.entries] == [
        Severity.INFO,
        Severity.DEBUG,
        Severity.INFO,
        Severity.WARNING,
        Severity.INFO,
        Severity.ERROR,
        Severity.INFO,
    ]
    assert sink.entries[0][0].message == "Compiling module 1"


def test_stop_before_start_produces_nothing(qapp) -> None:
    sink = RecordingSink()
    worker = DemoLogWorker(sink, lines=50, interval_ms=0)

    worker.stop()
    worker._produce()

    assert worker.produced == 0
    assert sink.entries == []


def test_runs_on_a_background_thread(qapp) -> None:
    sink = RecordingSink()
    finished: list[int] = []
    worker = DemoLogWorker(sink, lines=20, interval_ms=0)
    worker.signals.finished.connect(finished.append)

    worker.start()
    assert worker.wait(5000) is True
    process_events()

    assert finished == [20]
    assert len(sink.entries) == 20
    assert threading.get_ident() not in sink.threads
    assert worker.is_running() is False
