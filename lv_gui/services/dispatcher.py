"""Hand-off channel onto the UI-owning thread."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from PySide6.QtCore import QCoreApplication, QObject, Qt, Signal, Slot

from lv_common.errors import DispatcherUnavailableError

logger = logging.getLogger(__name__)


class UiDispatcher(QObject):
    """Runs posted callbacks later on the thread that owns the application.

    Posting never runs the callback inline, not even from the UI thread
    itself. Callbacks posted from one thread run in the order they were
    posted.
    """

    _posted = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._posted.connect(self._run, type=Qt.ConnectionType.QueuedConnection)

    def post(self, callback: Callable[[], None]) -> None:
        """Queue a callback for the UI thread. Safe from any thread."""
        self._posted.emit(callback)

    @Slot(object)
    def _run(self, callback: Callable[[], None]) -> None:
        callback()


_dispatcher: UiDispatcher | None = None
_dispatcher_lock = threading.Lock()


def get_dispatcher() -> UiDispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _dispatcher
    if _dispatcher is not None:
        return _dispatcher
    with _dispatcher_lock:
        if _dispatcher is None:
            app = QCoreApplication.instance()
            if app is None:
                raise DispatcherUnavailableError(
                    "A QApplication must exist before UI work can be dispatched"
                )
            dispatcher = UiDispatcher()
            dispatcher.moveToThread(app.thread())
            logger.debug("UI dispatcher created")
            _dispatcher = dispatcher
    return _dispatcher
