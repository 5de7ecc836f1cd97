"""
Console pane: timestamped, colour-coded log lines from the drafting core.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import QGroupBox, QPlainTextEdit, QSizePolicy, QVBoxLayout

from markdraft.gui.styles.theme import Colors, Fonts

MAX_LINES = 1000

LEVEL_COLORS: Dict[str, str] = {
    "error": Colors.ERROR,
    "critical": Colors.ERROR,
    "warning": Colors.WARNING,
}


def _char_format(color: str) -> QTextCharFormat:
    fmt = QTextCharFormat()
    fmt.setForeground(QColor(color))
    return fmt


class ConsoleWidget(QGroupBox):
    def __init__(self, parent=None):
        super().__init__("Log", parent)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.text_edit.setFont(QFont(Fonts.MONO_FONT.split(",")[0]))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.text_edit)

        self._default_format = _char_format(Colors.TEXT_PRIMARY)
        self._formats = {level: _char_format(color) for level, color in LEVEL_COLORS.items()}

    @Slot(str, str)
    def append_log(self, level: str, message: str) -> None:
        fmt = self._formats.get(level.lower(), self._default_format)
        stamp = datetime.now().strftime("%H:%M:%S")

        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        cursor.insertText(f"[{stamp}] {level.upper():<7} {message}\n", fmt)
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

        self._trim()

    def _trim(self) -> None:
        excess = self.text_edit.document().lineCount() - MAX_LINES
        if excess <= 0:
            return
        cursor = QTextCursor(self.text_edit.document())
        cursor.movePosition(QTextCursor.MoveOperation.Start)
        cursor.movePosition(
            QTextCursor.MoveOperation.Down, QTextCursor.MoveMode.KeepAnchor, excess
        )
        cursor.removeSelectedText()

    def clear(self) -> None:
        self.text_edit.clear()
