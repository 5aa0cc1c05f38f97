"""Top-level windows."""

from lv_gui.windows.main_window import MainWindow

__all__ = ["MainWindow"]
