"""QThread worker that streams sample log lines into a viewer."""

from __future__ import annotations

import itertools
import logging
import threading

from PySide6.QtCore import QObject, QThread, Signal

from lv_gui.services.log_bridge import LogSink, capture_logs

DEMO_LOGGER_NAME = "lv_demo.build"

_DEMO_STEPS: tuple[tuple[int, str], ...] = (
    (logging.INFO, "Compiling module {n}"),
    (logging.DEBUG, "Resolved include paths for module {n}"),
    (logging.INFO, "Linking target {n}"),
    (logging.WARNING, "Deprecated API used in module {n}"),
    (logging.INFO, "Packaging artifact {n}"),
    (logging.ERROR, "Step {n} failed, retrying"),
)


class DemoLogWorkerSignals(QObject):
    """Signals emitted by DemoLogWorker."""

    finished = Signal(int)  # entries produced
    failed = Signal(str)


class DemoLogWorker(QObject):
    """Worker that plays a background task writing log lines.

    Lines go through the stdlib logger ``lv_demo.build`` and reach the
    viewer via the logging bridge, so every entry crosses from the worker
    thread to the UI thread.

    Usage:
        worker = DemoLogWorker(viewer, lines=200, interval_ms=50)
        worker.signals.finished.connect(on_done)
        worker.start()
    """

    def __init__(
        self,
        sink: LogSink,
        *,
        lines: int = 200,
        interval_ms: int = 50,
        clear_first: bool = False,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._sink = sink
        self._lines = lines
        self._interval = interval_ms / 1000.0
        self._clear_first = clear_first
        self._stop = threading.Event()
        self._thread: QThread | None = None
        self._produced = 0

        self.signals = DemoLogWorkerSignals()

    @property
    def produced(self) -> int:
        return self._produced

    def start(self) -> None:
        """Start the worker in a new thread."""
        if self._thread is not None:
            return
        self._thread = QThread()
        self.moveToThread(self._thread)
        self._thread.started.connect(self._run)
        self._thread.start()

    def stop(self) -> None:
        """Ask the worker to stop after the current line."""
        self._stop.set()

    def _run(self) -> None:
        """Produce log lines (called in worker thread)."""
        try:
            self._produce()
            self.signals.finished.emit(self._produced)
        except Exception as exc:
            self.signals.failed.emit(str(exc))
        finally:
            self._cleanup_thread()

    def _produce(self) -> None:
        demo_logger = logging.getLogger(DEMO_LOGGER_NAME)
        demo_logger.setLevel(logging.DEBUG)
        demo_logger.propagate = False
        if self._clear_first and hasattr(self._sink, "clear_all_logs"):
            self._sink.clear_all_logs()
        with capture_logs(self._sink, [DEMO_LOGGER_NAME]):
            steps = itertools.cycle(_DEMO_STEPS)
            for n in range(1, self._lines + 1):
                if self._stop.is_set():
                    break
                level, template = next(steps)
                demo_logger.log(level, template.format(n=n))
                self._produced += 1
                if self._interval and self._stop.wait(self._interval):
                    break

    def _cleanup_thread(self) -> None:
        """Ask the thread's event loop to finish; it is reaped by ``wait``."""
        if self._thread is not None:
            self._thread.quit()

    def is_running(self) -> bool:
        """Check if the worker is currently running."""
        return self._thread is not None and self._thread.isRunning()

    def wait(self, timeout_ms: int = -1) -> bool:
        """Wait for the worker thread to finish.

        Returns:
            True if finished, False if timed out
        """
        if self._thread is None:
            return True
        finished = self._thread.wait(timeout_ms) if timeout_ms >= 0 else self._thread.wait()
        if finished:
            self._thread.deleteLater()
            self._thread = None
        return finished
