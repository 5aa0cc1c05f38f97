"""Live log viewer: a Qt widget streaming color-coded log entries."""
