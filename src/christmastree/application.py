from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

from christmastree import config
from christmastree.errors import WindowCreationError

ORG_ID = "christmastree"
APP_ID = "christmas-tree"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)

    app.setApplicationDisplayName(config.WINDOW_TITLE)

    # No screen means there is nothing to draw on
    if app.primaryScreen() is None:
        raise WindowCreationError("No screen available for the main window.")

    return app
