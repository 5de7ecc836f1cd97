"""Small Qt helpers shared by the panels."""
from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QBrush, QColor, QFont
from PySide6.QtWidgets import QListWidgetItem, QTableWidgetItem

from markdraft.core.models import Power
from markdraft.gui.styles.theme import Colors, power_colors, power_is_bold


def paint_power(item, power: Optional[Power]) -> None:
    """Colour a list or table item by quality tier."""
    if power is None:
        return
    fg, bg = power_colors(power)
    item.setForeground(QBrush(QColor(fg)))
    if bg is not None:
        item.setBackground(QBrush(QColor(bg)))
    if power_is_bold(power):
        font = item.font()
        font.setBold(True)
        item.setFont(font)


def highlight(item: QListWidgetItem) -> None:
    """Reverse-video style for the current line."""
    item.setBackground(QBrush(QColor(Colors.SELECTION_BG)))
    item.setForeground(QBrush(QColor(Colors.SELECTION_TEXT)))


def struck_out(text: str) -> QTableWidgetItem:
    item = QTableWidgetItem(text)
    font = QFont(item.font())
    font.setStrikeOut(True)
    item.setFont(font)
    return item


def join_tags(tags) -> str:
    return ", ".join(sorted(tags))
