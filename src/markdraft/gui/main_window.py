"""
Main Window for the Mark Draft GUI.

Every key press is translated to a logical key and handed to the
Session; the window then redraws from session state. Widgets never hold
the library between events.
"""
from __future__ import annotations

import logging
import queue
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QHBoxLayout, QInputDialog, QLineEdit, QMainWindow, QMessageBox,
    QSplitter, QStackedWidget, QTabBar, QVBoxLayout, QWidget,
)

from markdraft import __version__
from markdraft.drafting.keys import Key, KeyInput
from markdraft.drafting.session import InputOutcome, Pane, SaveError, Session, Tab
from markdraft.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler, drain_queue
from markdraft.gui.widgets.console_widget import ConsoleWidget
from markdraft.gui.widgets.draft_panel import DraftPanel
from markdraft.gui.widgets.mark_table import MarkTable
from markdraft.gui.widgets.results_panel import ResultsPanel

logger = logging.getLogger(__name__)

QT_KEYS = {
    int(Qt.Key.Key_Up): Key.UP,
    int(Qt.Key.Key_Down): Key.DOWN,
    int(Qt.Key.Key_Left): Key.LEFT,
    int(Qt.Key.Key_Right): Key.RIGHT,
    int(Qt.Key.Key_PageUp): Key.PAGE_UP,
    int(Qt.Key.Key_PageDown): Key.PAGE_DOWN,
    int(Qt.Key.Key_Backspace): Key.BACKSPACE,
    int(Qt.Key.Key_Return): Key.ENTER,
    int(Qt.Key.Key_Enter): Key.ENTER,
    int(Qt.Key.Key_Tab): Key.TAB,
    int(Qt.Key.Key_Escape): Key.ESCAPE,
}

TAB_ORDER = [Tab.DRAFT, Tab.RESULTS]


def key_from_event(event: QKeyEvent) -> Optional[KeyInput]:
    """Logical key for a Qt key event, or None if the core ignores it."""
    key = QT_KEYS.get(int(event.key()))
    if key is not None:
        return key
    text = event.text()
    if len(text) == 1 and text.isprintable():
        return text
    return None


class MainWindow(QMainWindow):
    def __init__(self, session: Session):
        super().__init__()
        self.session = session

        self.setWindowTitle(f"Mark Draft {__version__}")
        self.resize(1200, 800)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # --- Tabs ---
        self.tab_bar = QTabBar()
        self.tab_bar.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.tab_bar.addTab("Draft")
        self.tab_bar.addTab("Results")
        self.tab_bar.currentChanged.connect(self._on_tab_clicked)

        # --- Draft tab ---
        self.draft_panel = DraftPanel()
        self.mark_table = MarkTable()
        draft_page = QWidget()
        draft_layout = QHBoxLayout(draft_page)
        draft_layout.addWidget(self.draft_panel, 1)
        draft_layout.addWidget(self.mark_table, 1)

        # --- Results tab ---
        self.results_panel = ResultsPanel()

        self.stack = QStackedWidget()
        self.stack.addWidget(draft_page)
        self.stack.addWidget(self.results_panel)

        # --- Console ---
        self.console = ConsoleWidget()

        splitter = QSplitter(Qt.Orientation.Vertical)
        splitter.addWidget(self.stack)
        splitter.addWidget(self.console)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)

        central = QWidget()
        central.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        layout = QVBoxLayout(central)
        layout.addWidget(self.tab_bar)
        layout.addWidget(splitter, 1)
        self.setCentralWidget(central)

        # Logging → console
        self.log_queue: queue.Queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue, "markdraft")

        self.statusBar().showMessage(
            "a add draw · p power · c category · t tag · ←/→ rotate · "
            "⌫ delete · Enter draw · Tab marks · s save · q quit"
        )
        self.refresh()

    # ─────────────────────────────────────────────────────────────────────────
    # Input
    # ─────────────────────────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = key_from_event(event)
        if key is None:
            super().keyPressEvent(event)
            return
        self.handle_key(key)

    def focusNextPrevChild(self, next: bool) -> bool:
        # Tab is a pane switch, not focus navigation
        return False

    def handle_key(self, key: KeyInput) -> InputOutcome:
        outcome = self.session.input(key)
        if outcome is InputOutcome.QUIT:
            self.close()
        elif outcome is InputOutcome.SAVE_REQUESTED:
            self.prompt_save()
        self.refresh()
        return outcome

    def prompt_save(self) -> None:
        name, ok = QInputDialog.getText(
            self,
            "Save as",
            f"Name ({self.session.config.save_suffix}):",
            QLineEdit.EchoMode.Normal,
        )
        if ok:
            self.save_as(name)

    def save_as(self, name: str) -> bool:
        try:
            self.session.save(name)
        except SaveError as e:
            logger.error(str(e))
            QMessageBox.warning(self, "Save failed", str(e))
            return False
        return True

    def _on_tab_clicked(self, index: int) -> None:
        self.session.tab = TAB_ORDER[index]
        self.refresh()

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def refresh(self) -> None:
        session = self.session
        index = TAB_ORDER.index(session.tab)
        if self.tab_bar.currentIndex() != index:
            self.tab_bar.blockSignals(True)
            self.tab_bar.setCurrentIndex(index)
            self.tab_bar.blockSignals(False)
        self.stack.setCurrentIndex(index)

        if session.tab is Tab.DRAFT:
            self.draft_panel.refresh(session.editor, session.pane is Pane.DRAFT)
            self.mark_table.refresh(session.library, session.mark_list, session.pane is Pane.MARKS)
        else:
            self.results_panel.refresh(session.results)

        for message, level in drain_queue(self.log_queue):
            self.console.append_log(level, message)

    def closeEvent(self, event) -> None:
        detach_queue_handler(self._log_handler, "markdraft")
        super().closeEvent(event)
