"""
Qt application bootstrap.

Every native handle needs a live `QApplication`. Concrete widgets call
`ensure_application()` before building their handle, so host scripts never
have to create the application themselves.
"""

from __future__ import annotations

import logging
import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from interphase.settings import InterphaseSettings, load_settings

logger = logging.getLogger(__name__)


def ensure_application(settings: InterphaseSettings | None = None) -> QApplication:
    """
    Return the running Qt application, creating it on first use.

    Parameters
    ----------
    settings:
        Settings applied when the application has to be created. If None,
        settings are loaded with `load_settings()`. Ignored when an
        application already exists.

    Returns
    -------
    QApplication
        The process-wide application instance.
    """
    app = QApplication.instance()
    if app is not None:
        return app  # type: ignore[return-value]

    if settings is None:
        settings = load_settings()

    QCoreApplication.setApplicationName(settings.application_name)
    app = QApplication(sys.argv)
    if settings.style is not None:
        app.setStyle(settings.style)

    logger.debug("Created QApplication %r", settings.application_name)
    return app


def run() -> int:
    """
    Enter the Qt event loop.

    Returns
    -------
    int
        Exit code returned by the event loop.
    """
    app = ensure_application()
    logger.debug("Entering event loop")
    return app.exec()


def quit_application() -> None:
    """Ask the running event loop to exit. Does nothing if no application exists."""
    app = QApplication.instance()
    if app is not None:
        app.quit()
