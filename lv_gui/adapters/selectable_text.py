"""Text selection for otherwise static text displays.

A display gains selection by having a ``SelectionController`` attached at
construction. The controller switches the display's own text control into
read-only selection mode (nothing is re-rendered elsewhere) and routes the
copy, select-all and clear-selection keys through command handlers shared
by every display of the same type.

The handler tables live in a process-wide ``CommandRegistry`` keyed by
display type. The first controller for a type installs its table; later
ones, including ones racing on other threads, reuse it.

``resolve_entry_points`` is the only place that depends on the toolkit's
selection API. A display type missing any entry point cannot be made
selectable, and attaching to it fails with ``CapabilityBindingError``.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Protocol, runtime_checkable

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QGuiApplication, QKeyEvent, QKeySequence
from PySide6.QtWidgets import QLabel, QWidget

from lv_common.errors import CapabilityBindingError, wrap_error

logger = logging.getLogger(__name__)


@runtime_checkable
class SelectableText(Protocol):
    """Selection primitives a display must provide natively."""

    def text(self) -> str: ...

    def selectedText(self) -> str: ...

    def hasSelectedText(self) -> bool: ...

    def setSelection(self, start: int, length: int) -> None: ...

    def setTextInteractionFlags(self, flags: Qt.TextInteractionFlag) -> None: ...

    def textInteractionFlags(self) -> Qt.TextInteractionFlag: ...


REQUIRED_ENTRY_POINTS: tuple[str, ...] = (
    "text",
    "selectedText",
    "hasSelectedText",
    "setSelection",
    "setTextInteractionFlags",
    "textInteractionFlags",
)

READ_ONLY_SELECTION = (
    Qt.TextInteractionFlag.TextSelectableByMouse
    | Qt.TextInteractionFlag.TextSelectableByKeyboard
)


class EditCommand(str, Enum):
    COPY = "copy"
    SELECT_ALL = "select_all"
    CLEAR_SELECTION = "clear_selection"


CommandHandler = Callable[[SelectableText], None]
HandlerFactory = Callable[[type], Mapping[EditCommand, CommandHandler]]


def resolve_entry_points(display_type: type) -> dict[str, Callable]:
    """Look up the selection entry points on ``display_type``.

    Raises:
        CapabilityBindingError: if any entry point is missing.
    """
    resolved: dict[str, Callable] = {}
    missing: list[str] = []
    for name in REQUIRED_ENTRY_POINTS:
        entry = getattr(display_type, name, None)
        if callable(entry):
            resolved[name] = entry
        else:
            missing.append(name)
    if missing:
        raise CapabilityBindingError(
            f"{display_type.__name__} cannot be made selectable",
            context={"display_type": display_type, "missing": missing},
        )
    return resolved


def copy_selection(display: SelectableText) -> None:
    if not display.hasSelectedText():
        return
    QGuiApplication.clipboard().setText(display.selectedText())


def select_all(display: SelectableText) -> None:
    display.setSelection(0, len(display.text()))


def clear_selection(display: SelectableText) -> None:
    display.setSelection(0, 0)


def default_command_handlers(display_type: type) -> Mapping[EditCommand, CommandHandler]:
    return {
        EditCommand.COPY: copy_selection,
        EditCommand.SELECT_ALL: select_all,
        EditCommand.CLEAR_SELECTION: clear_selection,
    }


class CommandRegistry:
    """Per display type command handlers, installed at most once per type."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tables: dict[type, Mapping[EditCommand, CommandHandler]] = {}

    def ensure_registered(
        self,
        display_type: type,
        factory: HandlerFactory = default_command_handlers,
    ) -> bool:
        """Install handlers for ``display_type`` unless already present.

        Returns True only for the call that performed the registration.
        """
        if display_type in self._tables:
            return False
        with self._lock:
            if display_type in self._tables:
                return False
            self._tables[display_type] = MappingProxyType(dict(factory(display_type)))
        logger.debug("Registered selection commands for %s", display_type.__name__)
        return True

    def is_registered(self, display_type: type) -> bool:
        return display_type in self._tables

    def handler(self, display_type: type, command: EditCommand) -> CommandHandler:
        try:
            return self._tables[display_type][command]
        except KeyError as exc:
            raise wrap_error(
                CapabilityBindingError,
                f"No {command.value} handler registered for {display_type.__name__}",
                context={"display_type": display_type, "command": command.value},
                cause=exc,
            ) from exc

    def registered_types(self) -> tuple[type, ...]:
        return tuple(self._tables)


_registry = CommandRegistry()


def command_registry() -> CommandRegistry:
    """Return the process-wide command registry."""
    return _registry


_KEY_COMMANDS: tuple[tuple[QKeySequence.StandardKey, EditCommand], ...] = (
    (QKeySequence.StandardKey.Copy, EditCommand.COPY),
    (QKeySequence.StandardKey.SelectAll, EditCommand.SELECT_ALL),
    (QKeySequence.StandardKey.Cancel, EditCommand.CLEAR_SELECTION),
)


class SelectionController(QObject):
    """Hidden, read-only selection controller bound to one display.

    The controller is a child of its display, so it lives exactly as long as
    the display does.
    """

    def __init__(
        self,
        display: QWidget,
        *,
        registry: CommandRegistry | None = None,
        factory: HandlerFactory = default_command_handlers,
    ) -> None:
        display_type = type(display)
        resolve_entry_points(display_type)
        super().__init__(display)
        self._display = display
        self._display_type = display_type
        self._registry = registry or command_registry()
        self._registry.ensure_registered(display_type, factory)

        display.setTextInteractionFlags(READ_ONLY_SELECTION)
        display.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        display.installEventFilter(self)

    @property
    def view(self) -> QWidget:
        """The display whose own text control renders the selection."""
        return self._display

    @property
    def read_only(self) -> bool:
        flags = self._display.textInteractionFlags()
        return not bool(flags & Qt.TextInteractionFlag.TextEditable)

    def execute(self, command: EditCommand) -> None:
        handler = self._registry.handler(self._display_type, command)
        handler(self._display)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        # Qt can still route events here while the display is being torn down.
        display = getattr(self, "_display", None)
        if display is None or watched is not display:
            return False
        if event.type() == QEvent.Type.ShortcutOverride:
            if self._command_for(event) is not None:
                event.accept()
                return True
            return False
        if event.type() == QEvent.Type.KeyPress:
            command = self._command_for(event)
            if command is not None:
                self.execute(command)
                return True
        return False

    @staticmethod
    def _command_for(event: QEvent) -> EditCommand | None:
        if not isinstance(event, QKeyEvent):
            return None
        for key, command in _KEY_COMMANDS:
            if event.matches(key):
                return command
        return None


def attach_selection(
    display: QWidget, *, registry: CommandRegistry | None = None
) -> SelectionController:
    """Make ``display`` text-selectable without making it editable."""
    return SelectionController(display, registry=registry)


class SelectableLabel(QLabel):
    """Plain-text label whose text can be selected and copied."""

    def __init__(self, text: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setTextFormat(Qt.TextFormat.PlainText)
        self.setText(text)
        self._selection = attach_selection(self)

    @property
    def selection(self) -> SelectionController:
        return self._selection
