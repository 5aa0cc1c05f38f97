"""Adapters binding Qt primitives to the viewer's abstractions."""

from lv_gui.adapters.scroll_surface import ScrollBarSurface
from lv_gui.adapters.selectable_text import (
    CommandRegistry,
    EditCommand,
    SelectableLabel,
    SelectableText,
    SelectionController,
    attach_selection,
    command_registry,
    resolve_entry_points,
)

__all__ = [
    "ScrollBarSurface",
    "CommandRegistry",
    "EditCommand",
    "SelectableLabel",
    "SelectableText",
    "SelectionController",
    "attach_selection",
    "command_registry",
    "resolve_entry_points",
]
