"""
Module: drafting.editor.draft_editor

Purpose:
    Line-addressed editor for a draft (ordered list of draw specs).
    Holds the current line and an independent viewport scroll offset and
    applies structural edits and value rotation at the current line.

Key Classes:
    - DraftEditor: Draft + cursor + scroll with all editing operations

Operations:
    - move_up/move_down: Saturating cursor movement
    - scroll_up/scroll_down: Saturating viewport movement
    - add_plain_draw: Append an unconstrained draw
    - set_power/set_category/add_tag: Create or reset a field
    - rotate: Step the current field's value
    - delete_current: Remove a field, or the whole draw from its header

Empty draft:
    Every operation that needs a draw is a no-op returning False.

Dependencies:
    - drafting.editor.addressing: Line classification
    - drafting.editor.rotation: Candidate sets

Used By:
    - drafting.session: Draft tab input
    - gui.widgets.draft_panel: Rendering
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from markdraft.core.models import DrawSpec, Library, Power

from ..keys import Key, KeyInput, normalize_char
from .addressing import Element, ElementKind, LineIndex, build_line_index, classify
from .rotation import (
    Direction,
    category_candidates,
    first_unused_tag,
    power_candidates,
    rotate_value,
    tag_candidates,
)

logger = logging.getLogger(__name__)


@dataclass
class DraftEditor:
    """
    Editable draft with a flat line cursor.

    Attributes:
        draws: The draft, in resolution order
        line: Current line (zero-based)
        scroll: Viewport offset, independent of line
        starting_power: Value a newly set quality constraint starts at

    Invariants:
        - 0 <= line < total_lines whenever the draft is non-empty
        - 0 <= scroll < total_lines whenever the draft is non-empty
    """

    draws: List[DrawSpec] = field(default_factory=list)
    line: int = 0
    scroll: int = 0
    starting_power: Power = Power.SUPREME

    # ─────────────────────────────────────────────────────────────────────────
    # Addressing
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def total_lines(self) -> int:
        return sum(draw.line_count for draw in self.draws)

    @property
    def is_empty(self) -> bool:
        return not self.draws

    def line_index(self) -> LineIndex:
        return build_line_index(self.draws)

    def current_element(self) -> Optional[Element]:
        """Classification of the current line, or None on an empty draft."""
        return classify(self.draws, self.line)

    def selected_draw(self) -> Optional[DrawSpec]:
        element = self.current_element()
        if element is None:
            return None
        return self.draws[element.draw_index]

    # ─────────────────────────────────────────────────────────────────────────
    # Input
    # ─────────────────────────────────────────────────────────────────────────

    def input(self, library: Library, key: KeyInput) -> bool:
        """
        Apply one logical key.

        Returns:
            True if the key was recognised and changed state
        """
        char = normalize_char(key)
        if key is Key.DOWN:
            return self.move_down()
        if key is Key.UP:
            return self.move_up()
        if key is Key.PAGE_DOWN:
            return self.scroll_down()
        if key is Key.PAGE_UP:
            return self.scroll_up()
        if key is Key.LEFT:
            return self.rotate(library, Direction.FORWARD)
        if key is Key.RIGHT:
            return self.rotate(library, Direction.BACKWARD)
        if key is Key.BACKSPACE:
            return self.delete_current()
        if char == "a":
            return self.add_plain_draw()
        if char == "c":
            return self.set_category(library)
        if char == "p":
            return self.set_power()
        if char == "t":
            return self.add_tag(library)
        return False

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────────

    def move_down(self) -> bool:
        new_line = min(self._last_line(), self.line + 1)
        changed = new_line != self.line
        self.line = new_line
        return changed

    def move_up(self) -> bool:
        new_line = max(0, self.line - 1)
        changed = new_line != self.line
        self.line = new_line
        return changed

    def scroll_down(self) -> bool:
        new_scroll = min(self._last_line(), self.scroll + 1)
        changed = new_scroll != self.scroll
        self.scroll = new_scroll
        return changed

    def scroll_up(self) -> bool:
        new_scroll = max(0, self.scroll - 1)
        changed = new_scroll != self.scroll
        self.scroll = new_scroll
        return changed

    def _last_line(self) -> int:
        return max(0, self.total_lines - 1)

    def _clamp(self) -> None:
        last = self._last_line()
        self.line = min(max(0, self.line), last)
        self.scroll = min(max(0, self.scroll), last)

    # ─────────────────────────────────────────────────────────────────────────
    # Structural edits
    # ─────────────────────────────────────────────────────────────────────────

    def add_plain_draw(self) -> bool:
        """Append an unconstrained draw. Always legal."""
        self.draws.append(DrawSpec())
        return True

    def set_power(self) -> bool:
        """Set (or reset) the selected draw's quality to the starting value."""
        draw = self._require_draw("set power")
        if draw is None:
            return False
        draw.power = self.starting_power
        return True

    def set_category(self, library: Library) -> bool:
        """Set (or reset) the selected draw's category to the library's first."""
        draw = self._require_draw("set category")
        if draw is None:
            return False
        categories = category_candidates(library)
        if not categories:
            logger.debug("Library has no categories; set category ignored")
            return False
        draw.category = categories[0]
        return True

    def add_tag(self, library: Library) -> bool:
        """Append the first library tag not already on the selected draw."""
        draw = self._require_draw("add tag")
        if draw is None:
            return False
        tag = first_unused_tag(library, draw)
        if tag is None:
            logger.debug("Every library tag is already on this draw")
            return False
        draw.tags.append(tag)
        return True

    def delete_current(self) -> bool:
        """
        Delete the element at the current line.

        A header line removes the whole draw; any other line clears only
        that field. The cursor then moves up one line (saturating).
        """
        element = self.current_element()
        if element is None:
            logger.debug("Delete on an empty draft ignored")
            return False

        draw = self.draws[element.draw_index]
        if element.kind is ElementKind.MARK:
            del self.draws[element.draw_index]
        elif element.kind is ElementKind.POWER:
            draw.power = None
        elif element.kind is ElementKind.CATEGORY:
            draw.category = None
        else:
            del draw.tags[element.tag_index]

        self.line = max(0, self.line - 1)
        self._clamp()
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Rotation
    # ─────────────────────────────────────────────────────────────────────────

    def rotate(self, library: Library, direction: Direction) -> bool:
        """
        Step the current element's value one place in direction.

        Header lines are not rotatable. Quality cycles through all seven
        tiers, category through the library categories, and a tag through
        the library tags not used elsewhere in the same draw.

        Returns:
            True if the value changed
        """
        element = self.current_element()
        if element is None:
            logger.debug("Rotate on an empty draft ignored")
            return False

        draw = self.draws[element.draw_index]
        if element.kind is ElementKind.POWER:
            new_power = rotate_value(draw.power, power_candidates(), direction)
            return self._assign(draw, "power", new_power)
        if element.kind is ElementKind.CATEGORY:
            new_category = rotate_value(draw.category, category_candidates(library), direction)
            return self._assign(draw, "category", new_category)
        if element.kind is ElementKind.TAG:
            index = element.tag_index
            new_tag = rotate_value(
                draw.tags[index], tag_candidates(library, draw, index), direction
            )
            if new_tag is None or new_tag == draw.tags[index]:
                return False
            draw.tags[index] = new_tag
            return True
        return False

    @staticmethod
    def _assign(draw: DrawSpec, attr: str, value) -> bool:
        if value is None or value == getattr(draw, attr):
            return False
        setattr(draw, attr, value)
        return True

    def _require_draw(self, action: str) -> Optional[DrawSpec]:
        draw = self.selected_draw()
        if draw is None:
            logger.debug(f"No draw selected; {action} ignored")
        return draw
