"""Services backing the log viewer."""

from lv_gui.services.dispatcher import UiDispatcher, get_dispatcher
from lv_gui.services.log_bridge import (
    LogViewerHandler,
    attach_viewer_handler,
    capture_logs,
)
from lv_gui.services.log_stream import (
    AppendOnlyLogStream,
    RecordRole,
    StreamMessage,
    StreamOp,
    TimestampRole,
)
from lv_gui.services.settings import ViewerSettings

__all__ = [
    "UiDispatcher",
    "get_dispatcher",
    "LogViewerHandler",
    "attach_viewer_handler",
    "capture_logs",
    "AppendOnlyLogStream",
    "RecordRole",
    "StreamMessage",
    "StreamOp",
    "TimestampRole",
    "ViewerSettings",
]
