"""
Entry point for the PySide6 GUI.

The library is loaded before any Qt object exists so load errors are
reported on stderr and the process exits non-zero.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from markdraft.drafting.config import SessionConfig
from markdraft.drafting.loading import LoaderError, load_session_file
from markdraft.drafting.session import Session

logger = logging.getLogger(__name__)


def create_session(library_path: Path, config: Optional[SessionConfig] = None) -> Session:
    """
    Load library_path and build a session around it.

    Raises:
        LoaderError: If the library or snapshot cannot be loaded
    """
    library, results = load_session_file(library_path)
    return Session(library, results=results, config=config)


def run(library_path: Path, config: Optional[SessionConfig] = None) -> int:
    """
    Main entry point for the GUI application.

    Returns:
        Process exit code
    """
    try:
        session = create_session(library_path, config)
    except LoaderError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    from PySide6.QtWidgets import QApplication
    from markdraft.gui.main_window import MainWindow
    from markdraft.gui.styles.theme import GLOBAL_STYLESHEET

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Mark Draft")
    app.setApplicationDisplayName("Mark Draft")
    app.setStyleSheet(GLOBAL_STYLESHEET)

    window = MainWindow(session)
    window.show()
    window.setFocus()

    return app.exec()
