"""Application setup."""

from __future__ import annotations

from lv_gui.services.settings import ViewerSettings
from lv_gui.windows.main_window import MainWindow
from lv_gui.workers.demo_worker import DemoLogWorker


def create_app(settings: ViewerSettings) -> tuple[MainWindow, DemoLogWorker | None]:
    """Create the main window and, in demo mode, its sample producer."""
    window = MainWindow()
    worker: DemoLogWorker | None = None
    if settings.demo:
        worker = DemoLogWorker(
            window.log_viewer,
            lines=settings.demo_lines,
            interval_ms=settings.demo_interval_ms,
        )
    return window, worker
