"""
Cursor over the library's marks, used by the Marks pane.

Selection wraps in both directions. Enter toggles availability of the
selected mark; this is the only way availability ever changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from markdraft.core.models import Library, LibraryEntry

from .keys import Key, KeyInput

logger = logging.getLogger(__name__)


@dataclass
class MarkList:
    n_items: int
    selected: Optional[int] = None

    def input(self, library: Library, key: KeyInput) -> bool:
        if key is Key.UP:
            return self.select_previous()
        if key is Key.DOWN:
            return self.select_next()
        if key is Key.ENTER:
            return self.toggle_selected(library)
        return False

    def select_next(self) -> bool:
        if self.n_items == 0:
            return False
        if self.selected is None or self.selected >= self.n_items - 1:
            self.selected = 0
        else:
            self.selected += 1
        return True

    def select_previous(self) -> bool:
        if self.n_items == 0:
            return False
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = self.n_items - 1
        else:
            self.selected -= 1
        return True

    def toggle_selected(self, library: Library) -> bool:
        if self.selected is None:
            return False
        available = library.toggle_availability(self.selected)
        name = library.entries[self.selected].mark.name
        logger.info(f"{name} is now {'available' if available else 'checked out'}")
        return True

    def selected_entry(self, library: Library) -> Optional[LibraryEntry]:
        if self.selected is None or self.selected >= len(library):
            return None
        return library.entries[self.selected]
