"""Unit tests for the LogViewer composition."""

from __future__ import annotations

import threading

import pytest

from lv_gui.models.log_record import LogRecord
from lv_gui.models.severity import Severity
from lv_gui.viewmodels.autoscroll_vm import ScrollChange
from lv_gui.widgets.log_viewer import LogViewer
from tests.helpers.qt import process_events

pytestmark = pytest.mark.unit_gui


@pytest.fixture
def viewer(qapp):
    widget = LogViewer()
    yield widget
    widget.deleteLater()


def test_add_log_entry_resolves_color_and_renders_row(viewer) -> None:
    record = LogRecord(message="warming caches")

    viewer.add_log_entry(record, Severity.WARNING)
    process_events()

    assert record.color == "#FFD700"
    assert viewer.stream.records() == (record,)
    assert viewer.row_count() == 1
    row = viewer.rows()[0]
    assert row.record is record
    assert row.message_label.text() == "warming caches"
    assert "#FFD700" in row.message_label.styleSheet()


def test_clear_all_logs_removes_rows(viewer) -> None:
    for n in range(4):
        viewer.add_log_entry(LogRecord(message=str(n)), Severity.INFO)
    process_events()
    assert viewer.row_count() == 4

    viewer.clear_all_logs()
    process_events()

    assert viewer.row_count() == 0
    assert len(viewer.stream) == 0


def test_entry_count_signal(viewer) -> None:
    counts: list[int] = []
    viewer.entry_count_changed.connect(counts.append)

    viewer.add_log_entry(LogRecord(message="a"), Severity.DEBUG)
    viewer.add_log_entry(LogRecord(message="b"), Severity.DEBUG)
    viewer.clear_all_logs()
    process_events()

    assert counts == [1, 2, 0]


def test_entries_from_worker_threads(viewer) -> None:
    def produce(tag: str) -> None:
        for seq in range(25):
            viewer.add_log_entry(LogRecord(message=f"{tag}{seq}"), Severity.INFO)

    threads = [threading.Thread(target=produce, args=(tag,)) for tag in "abc"]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    process_events()

    messages = [row.record.message for row in viewer.rows()]
    assert len(messages) == 75
    for tag in "abc":
        assert [m for m in messages if m.startswith(tag)] == [f"{tag}{n}" for n in range(25)]


def test_follows_tail_until_user_scrolls_away(viewer) -> None:
    bar = viewer.surface.scroll_bar

    bar.setRange(0, 100)
    assert bar.value() == 100
    assert viewer.autoscroll.pinned is True

    bar.setValue(50)
    assert viewer.autoscroll.pinned is False

    bar.setRange(0, 160)
    assert bar.value() == 50
    assert viewer.autoscroll.pinned is False

    bar.setValue(160)
    assert viewer.autoscroll.pinned is True
    bar.setRange(0, 200)
    assert bar.value() == 200


def test_scroll_failure_becomes_one_error_entry(viewer) -> None:
    calls = {"count": 0}

    def fail_once() -> None:
        calls["count"] += 1
        if calls["count"] == 1:
            raise RuntimeError("surface detached")

    viewer.surface.scroll_to_max = fail_once
    viewer.surface.scroll_changed.emit(
        ScrollChange(extent_changed=True, offset=0, max_offset=40, extent=60)
    )
    process_events()

    errors = [r for r in viewer.stream.records() if r.severity is Severity.ERROR]
    assert len(errors) == 1
    assert errors[0].message == "APPLICATION ERROR: surface detached"
    assert errors[0].color == "#FF0000"


def test_shown_viewer_stays_at_bottom(viewer) -> None:
    viewer.resize(400, 120)
    viewer.show()
    process_events()

    for n in range(3):
        viewer.add_log_entry(LogRecord(message=f"line {n}"), Severity.INFO)
        process_events()

    bar = viewer.surface.scroll_bar
    assert viewer.autoscroll.pinned is True
    assert bar.value() == bar.maximum()
    viewer.hide()


def test_keeps_following_after_window_shrinks_by_one_row(viewer) -> None:
    viewer.resize(400, 300)
    viewer.show()
    process_events()
    for n in range(60):
        viewer.add_log_entry(LogRecord(message=f"line {n}"), Severity.INFO)
    process_events(rounds=5)

    bar = viewer.surface.scroll_bar
    assert bar.maximum() > 0
    assert bar.value() == bar.maximum()

    row_step = viewer.rows()[-1].height() + viewer._rows_layout.spacing()
    viewer.resize(400, 300 - row_step)
    process_events(rounds=5)
    assert viewer.autoscroll.pinned is True
    assert bar.value() == bar.maximum()

    viewer.add_log_entry(LogRecord(message="one more"), Severity.INFO)
    process_events(rounds=5)

    assert viewer.autoscroll.pinned is True
    assert bar.value() == bar.maximum()
    viewer.hide()


def test_pinned_changed_signal(viewer) -> None:
    flips: list[bool] = []
    viewer.pinned_changed.connect(flips.append)
    bar = viewer.surface.scroll_bar

    bar.setRange(0, 100)
    bar.setValue(30)
    bar.setValue(100)

    assert flips == [False, True]
