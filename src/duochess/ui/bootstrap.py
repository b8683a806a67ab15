"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from duochess.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level_name: str) -> None:
    """Configure root logging once; unknown level names fall back to WARNING."""
    level = logging.getLevelNamesMapping().get(level_name.upper())
    if level is None:
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)
        _LOGGER.warning("Unknown log level %r, using WARNING", level_name)
        return
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from duochess.ui.styles.theme import APP_STYLE

    app.setApplicationName("duochess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from duochess.ui.main_window import MainWindow

    settings = AppSettings.from_env(os.environ)
    configure_logging(settings.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.debug("Main window shown with theme %s", settings.board_theme)

    return app.exec()
