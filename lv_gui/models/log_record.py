"""A single line shown by the log viewer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from lv_gui.models.notifier import ChangeNotifier
from lv_gui.models.severity import Severity, severity_color

APPLICATION_ERROR_PREFIX = "APPLICATION ERROR: "


@dataclass(eq=False)
class LogRecord(ChangeNotifier):
    """One log line: when it happened, what it says, and how it is colored.

    Records have no identity beyond their position in a stream, so equality
    is identity. The only mutation after construction is ``apply_severity``,
    which the viewer calls before handing the record to its stream.
    """

    message: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    severity: Severity = Severity.INFO
    color: str | None = None

    def apply_severity(self, severity: Severity) -> None:
        """Set the severity and resolve its palette color."""
        self.severity = Severity(severity)
        self.color = severity_color(self.severity)
        self.notify_property_changed("severity")
        self.notify_property_changed("color")

    @classmethod
    def error(cls, message: str) -> "LogRecord":
        """Build the record reported for an internal viewer failure."""
        return cls(message=f"{APPLICATION_ERROR_PREFIX}{message}")
