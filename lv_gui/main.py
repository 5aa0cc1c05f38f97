"""Console entrypoint for the viewer (lv-viewer)."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from lv_common.logging import configure_logging
from lv_gui.services.settings import ViewerSettings

logger = logging.getLogger(__name__)

cli = typer.Typer(
    help="Watch a live, color-coded log stream.",
    add_completion=False,
)


@cli.command()
def run(
    demo: Optional[bool] = typer.Option(
        None,
        "--demo/--no-demo",
        help="Stream sample build output from a background thread.",
    ),
    lines: Optional[int] = typer.Option(
        None, "--lines", min=0, help="Number of sample lines in demo mode."
    ),
    interval_ms: Optional[int] = typer.Option(
        None, "--interval-ms", min=0, help="Delay between sample lines."
    ),
    theme: Optional[str] = typer.Option(None, "--theme", help="Theme name."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Open the log viewer window."""
    # Configure logging before anything else
    configure_logging(debug=debug)
    settings = ViewerSettings.from_env().with_overrides(
        demo=demo,
        demo_lines=lines,
        demo_interval_ms=interval_ms,
        theme=theme,
    )
    raise typer.Exit(launch(settings))


def launch(settings: ViewerSettings) -> int:
    """Launch the GUI application and block until it exits."""
    # Import Qt after logging is configured
    from PySide6.QtWidgets import QApplication

    from lv_gui.app import create_app
    from lv_gui.resources.theme import apply_theme

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Live Log Viewer")
    app.setOrganizationName("lv")

    applied = apply_theme(app, settings.theme)
    logger.debug("Applied theme %s", applied)

    window, worker = create_app(settings)
    window.show()

    if worker is not None:

        def stop_worker() -> None:
            worker.stop()
            worker.wait(2000)

        app.aboutToQuit.connect(stop_worker)
        worker.start()

    return app.exec()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
