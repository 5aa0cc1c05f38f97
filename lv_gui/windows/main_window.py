"""Main application window hosting the log viewer."""

from __future__ import annotations

from PySide6.QtGui import QAction, QActionGroup
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QWidget

from lv_gui.resources.theme import apply_theme, get_preferred_theme, list_themes
from lv_gui.utils import set_widget_role
from lv_gui.widgets import LogViewer


class MainWindow(QMainWindow):
    """Window with the log viewer, a clear action and an entry counter."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self._connect_signals()
        self._setup_menu()

    def _setup_ui(self) -> None:
        """Set up the main UI layout."""
        self.setWindowTitle("Live Log Viewer")
        self.setMinimumSize(900, 600)

        self._log_viewer = LogViewer()
        self.setCentralWidget(self._log_viewer)

        toolbar = self.addToolBar("Log")
        toolbar.setMovable(False)
        self._clear_action = QAction("Clear", self)
        self._clear_action.setToolTip("Remove every entry from the log")
        toolbar.addAction(self._clear_action)

        self._count_label = QLabel("Entries: 0")
        set_widget_role(self._count_label, "muted")
        self._follow_label = QLabel("")
        self.statusBar().addPermanentWidget(self._follow_label)
        self.statusBar().addPermanentWidget(self._count_label)

        self._on_pinned_changed(self._log_viewer.autoscroll.pinned)

    def _connect_signals(self) -> None:
        self._clear_action.triggered.connect(self._log_viewer.clear_all_logs)
        self._log_viewer.entry_count_changed.connect(self._on_entry_count_changed)
        self._log_viewer.pinned_changed.connect(self._on_pinned_changed)

    def _setup_menu(self) -> None:
        """Create the application menu."""
        view_menu = self.menuBar().addMenu("View")

        theme_menu = view_menu.addMenu("Theme")
        theme_group = QActionGroup(self)
        theme_group.setExclusive(True)

        current_theme = get_preferred_theme()
        for name in list_themes():
            action = theme_menu.addAction(name.title())
            action.setCheckable(True)
            action.setData(name)
            if name == current_theme:
                action.setChecked(True)
            theme_group.addAction(action)

        def on_theme_selected(action) -> None:  # type: ignore[no-untyped-def]
            app = QApplication.instance()
            if app is None:
                return
            apply_theme(app, action.data(), save=True)

        theme_group.triggered.connect(on_theme_selected)

    @property
    def log_viewer(self) -> LogViewer:
        return self._log_viewer

    def _on_entry_count_changed(self, count: int) -> None:
        self._count_label.setText(f"Entries: {count}")

    def _on_pinned_changed(self, pinned: bool) -> None:
        if pinned:
            self._follow_label.setText("Following")
            set_widget_role(self._follow_label, "status-info")
        else:
            self._follow_label.setText("Paused")
            set_widget_role(self._follow_label, "status-warning")
