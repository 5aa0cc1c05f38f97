"""QThread workers for background producers."""

from lv_gui.workers.demo_worker import DemoLogWorker, DemoLogWorkerSignals

__all__ = [
    "DemoLogWorker",
    "DemoLogWorkerSignals",
]
