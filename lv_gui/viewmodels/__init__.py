"""View state for the log viewer."""

from lv_gui.viewmodels.autoscroll_vm import (
    AutoScrollController,
    ScrollChange,
    ScrollSurface,
)

__all__ = [
    "AutoScrollController",
    "ScrollChange",
    "ScrollSurface",
]
