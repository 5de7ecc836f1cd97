"""
Marks pane: library table plus a description box for the selected mark.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView, QGroupBox, QHeaderView, QTableWidget,
    QTableWidgetItem, QTextBrowser, QVBoxLayout,
)

from markdraft.core.models import Library
from markdraft.drafting.mark_list import MarkList
from markdraft.gui.utils.helpers import join_tags, paint_power, struck_out

COLUMNS = ["Name", "Power", "Category", "Tags"]


class MarkTable(QGroupBox):
    def __init__(self, parent=None):
        super().__init__("Marks", parent)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        layout = QVBoxLayout(self)

        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        layout.addWidget(self.table, 3)

        self.description = QTextBrowser()
        self.description.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        layout.addWidget(self.description, 2)

    def refresh(self, library: Library, mark_list: MarkList, active: bool) -> None:
        self.table.setRowCount(len(library))
        for row, entry in enumerate(library):
            mark = entry.mark
            name = QTableWidgetItem(mark.name) if entry.available else struck_out(mark.name)
            power = QTableWidgetItem(mark.power.label)
            paint_power(power, mark.power)
            self.table.setItem(row, 0, name)
            self.table.setItem(row, 1, power)
            self.table.setItem(row, 2, QTableWidgetItem(mark.category))
            self.table.setItem(row, 3, QTableWidgetItem(join_tags(mark.tags)))

        if mark_list.selected is not None:
            self.table.selectRow(mark_list.selected)
        else:
            self.table.clearSelection()

        self._show_description(library, mark_list)
        self.setEnabled(active)

    def _show_description(self, library: Library, mark_list: MarkList) -> None:
        entry = mark_list.selected_entry(library)
        if entry is None and len(library):
            entry = library.entries[0]
        if entry is None:
            self.description.clear()
            return
        mark = entry.mark
        self.description.setMarkdown(
            f"**{mark.name}**\n\n"
            f"**Power:** {mark.power.label}  \n"
            f"**Category:** {mark.category}  \n"
            f"**Tags:** {join_tags(mark.tags)}\n\n"
            f"**Description**\n\n{mark.description}"
        )
