"""
Results tab: execution list, resolved marks and the draws that produced them.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView, QHBoxLayout, QListWidget, QListWidgetItem, QWidget,
)

from markdraft.core.models import ResultsHistory
from markdraft.gui.utils.helpers import highlight, paint_power
from markdraft.gui.widgets.draft_panel import fill_draft_list

EMPTY_TEXT = "<empty>"


def _read_only_list() -> QListWidget:
    widget = QListWidget()
    widget.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    widget.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
    return widget


class ResultsPanel(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        layout = QHBoxLayout(self)
        self.history_list = _read_only_list()
        self.history_list.setMaximumWidth(160)
        self.marks_list = _read_only_list()
        self.draws_list = _read_only_list()
        layout.addWidget(self.history_list)
        layout.addWidget(self.marks_list, 1)
        layout.addWidget(self.draws_list, 1)

    def refresh(self, results: ResultsHistory) -> None:
        self.history_list.clear()
        self.marks_list.clear()
        self.draws_list.clear()

        if not len(results):
            self.history_list.addItem(EMPTY_TEXT)
            return

        for i in range(len(results)):
            item = QListWidgetItem(f"Draft #{i}")
            if i == results.selected:
                highlight(item)
            self.history_list.addItem(item)

        entry = results.current
        if entry is None:
            return
        for mark in entry.marks:
            item = QListWidgetItem(mark.name)
            paint_power(item, mark.power)
            self.marks_list.addItem(item)
        fill_draft_list(self.draws_list, entry.draws)
