"""Auto-scroll state machine for the log viewer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScrollChange:
    """One scroll-surface change event.

    ``extent_changed`` is true when the content size changed (new or
    removed entries); false when only the position moved, i.e. the user
    scrolled.
    """

    extent_changed: bool
    offset: int
    max_offset: int
    extent: int


class ScrollSurface(Protocol):
    """What the controller needs from the surface it drives."""

    def scroll_to_max(self) -> None: ...


class AutoScrollController:
    """Keeps the view on the newest entry until the user scrolls away.

    ``pinned`` starts true and is only ever changed by user scrolls: at the
    bottom re-pins, anywhere else unpins. Content growth while pinned
    follows the tail; content growth while unpinned leaves the view alone.
    ``on_pinned_changed`` receives the new value each time it flips.
    """

    def __init__(
        self,
        on_error: Callable[[Exception], None],
        on_pinned_changed: Callable[[bool], None] | None = None,
    ) -> None:
        self._pinned = True
        self._on_error = on_error
        self._on_pinned_changed = on_pinned_changed

    @property
    def pinned(self) -> bool:
        return self._pinned

    def on_scroll_changed(
        self, change: ScrollChange, surface: ScrollSurface | None
    ) -> None:
        """Handle a scroll-surface change. Never raises."""
        try:
            if not change.extent_changed:
                self._set_pinned(change.offset == change.max_offset)
            if self._pinned and change.extent_changed:
                surface.scroll_to_max()
        except Exception as exc:
            logger.exception("Scroll handling failed")
            self._report(exc)

    def _set_pinned(self, pinned: bool) -> None:
        if pinned == self._pinned:
            return
        self._pinned = pinned
        if self._on_pinned_changed is not None:
            self._on_pinned_changed(pinned)

    def _report(self, exc: Exception) -> None:
        try:
            self._on_error(exc)
        except Exception:
            logger.exception("Could not report scroll failure to the viewer")
