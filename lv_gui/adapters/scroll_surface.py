"""Scroll bar adapter feeding the auto-scroll controller."""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal, Slot
from PySide6.QtWidgets import QScrollBar, QWidget

from lv_gui.viewmodels.autoscroll_vm import ScrollChange


class ScrollBarSurface(QObject):
    """Turns a vertical scroll bar into a stream of ``ScrollChange`` events.

    The content extent is ``maximum - minimum`` plus the viewport height.
    A scroll area announces its new range before it updates ``pageStep``,
    so when a viewport widget is given its live height is used instead.

    A range change is never a user scroll. It is reported as an extent
    change, except when the extent is unchanged and the bar sits at its
    maximum (a viewport resize ending at the bottom), which is reported as
    a positional change. Value changes are positional only.
    """

    scroll_changed = Signal(object)  # ScrollChange

    def __init__(
        self,
        scroll_bar: QScrollBar,
        parent: QObject | None = None,
        *,
        viewport: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._bar = scroll_bar
        self._viewport = viewport
        self._extent = self._current_extent()
        scroll_bar.rangeChanged.connect(self._on_range_changed)
        scroll_bar.valueChanged.connect(self._on_value_changed)

    @property
    def scroll_bar(self) -> QScrollBar:
        return self._bar

    @property
    def offset(self) -> int:
        return self._bar.value()

    @property
    def max_offset(self) -> int:
        return self._bar.maximum()

    def scroll_to_max(self) -> None:
        self._bar.setValue(self._bar.maximum())

    def _visible_span(self) -> int:
        if self._viewport is not None:
            return self._viewport.height()
        return self._bar.pageStep()

    def _current_extent(self) -> int:
        return self._bar.maximum() - self._bar.minimum() + self._visible_span()

    @Slot(int, int)
    def _on_range_changed(self, minimum: int, maximum: int) -> None:
        extent = self._current_extent()
        # The bar re-clamps its value only after announcing the new range.
        offset = min(max(self._bar.value(), minimum), maximum)
        extent_changed = not (extent == self._extent and offset == maximum)
        self._extent = extent
        self.scroll_changed.emit(
            ScrollChange(
                extent_changed=extent_changed,
                offset=offset,
                max_offset=maximum,
                extent=extent,
            )
        )

    @Slot(int)
    def _on_value_changed(self, value: int) -> None:
        self.scroll_changed.emit(
            ScrollChange(
                extent_changed=False,
                offset=value,
                max_offset=self._bar.maximum(),
                extent=self._extent,
            )
        )
