"""
Draft panel: one list row per addressable draft line.
"""
from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import QAbstractItemView, QGroupBox, QListWidget, QListWidgetItem, QVBoxLayout

from markdraft.core.models import DrawSpec
from markdraft.drafting.editor import DraftEditor, ElementKind, format_draft_lines
from markdraft.gui.styles.theme import Colors
from markdraft.gui.utils.helpers import highlight, paint_power


def fill_draft_list(widget: QListWidget, draws: Sequence[DrawSpec], current_line: int = -1) -> None:
    """Render draws into widget; current_line < 0 means no highlight."""
    widget.clear()
    for i, line in enumerate(format_draft_lines(draws)):
        item = QListWidgetItem(line.text)
        if line.kind is ElementKind.MARK:
            item.setForeground(QBrush(QColor(Colors.DRAW_HEADER)))
        elif line.kind is ElementKind.POWER:
            paint_power(item, line.power)
        if i == current_line:
            highlight(item)
        widget.addItem(item)


class DraftPanel(QGroupBox):
    def __init__(self, parent=None):
        super().__init__("Draft", parent)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        layout = QVBoxLayout(self)
        self.list = QListWidget()
        self.list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.list.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.list.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerItem)
        layout.addWidget(self.list)

    def refresh(self, editor: DraftEditor, active: bool) -> None:
        fill_draft_list(self.list, editor.draws, editor.line)
        if self.list.count():
            self.list.scrollToItem(
                self.list.item(min(editor.scroll, self.list.count() - 1)),
                QAbstractItemView.ScrollHint.PositionAtTop,
            )
        self.setEnabled(active)
