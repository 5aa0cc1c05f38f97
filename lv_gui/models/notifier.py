"""Property-change notification delivered on the UI thread."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

PropertyObserver = Callable[[Any, str], None]


class ChangeNotifier:
    """Mixin giving an entity an observable "property changed" event.

    Observers are called with ``(sender, property_name)``. Notifications are
    queued onto the UI event loop and delivered after the hand-off, never
    synchronously, whichever thread raised them.
    """

    def _observer_list(self) -> list[PropertyObserver]:
        observers = self.__dict__.get("_observers")
        if observers is None:
            observers = []
            self.__dict__["_observers"] = observers
        return observers

    def add_observer(self, callback: PropertyObserver) -> None:
        self._observer_list().append(callback)

    def remove_observer(self, callback: PropertyObserver) -> None:
        observers = self._observer_list()
        if callback in observers:
            observers.remove(callback)

    def notify_property_changed(self, name: str) -> None:
        """Queue a notification for ``name`` on the UI thread."""
        if not self._observer_list():
            return
        from lv_gui.services.dispatcher import get_dispatcher

        get_dispatcher().post(partial(self._deliver, name))

    def _deliver(self, name: str) -> None:
        for callback in tuple(self._observer_list()):
            callback(self, name)
