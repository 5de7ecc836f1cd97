"""
Module: drafting.editor.addressing

Purpose:
    Line addressing scheme for a draft. Presents a list of variable-shape
    draw specifications as one flat, zero-based sequence of lines and
    classifies any line as a specific element of a specific draw.

Key Functions:
    - build_line_index(): Start offsets for every draw
    - classify(): Line number -> Element (kind, draw index, tag index)
    - element_kinds(): Element order within one draw

Key Classes:
    - ElementKind: MARK / POWER / CATEGORY / TAG
    - Element: Classification result
    - LineIndex: Start-offset table with locate()

Element order within a draw (shared by rendering and editing):
    offset 0      -> MARK (header line)
    next, if set  -> POWER
    next, if set  -> CATEGORY
    remaining     -> TAG, in list order

Dependencies:
    - bisect (std)
    - core.models.DrawSpec

Used By:
    - drafting.editor.draft_editor
    - drafting.editor.formatting
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from markdraft.core.models import DrawSpec


class ElementKind(Enum):
    MARK = "mark"
    POWER = "power"
    CATEGORY = "category"
    TAG = "tag"


@dataclass(frozen=True)
class Element:
    """
    One addressable line of a draft.

    Attributes:
        kind: What the line shows
        draw_index: Index of the owning draw in the draft
        offset: Line offset within the owning draw
        tag_index: Index into draw.tags for TAG elements, else None
    """

    kind: ElementKind
    draw_index: int
    offset: int
    tag_index: Optional[int] = None


def element_kinds(draw: DrawSpec) -> List[Tuple[ElementKind, Optional[int]]]:
    """
    Elements of draw in line order.

    Returns:
        (kind, tag_index) per line; len == draw.line_count
    """
    kinds: List[Tuple[ElementKind, Optional[int]]] = [(ElementKind.MARK, None)]
    if draw.power is not None:
        kinds.append((ElementKind.POWER, None))
    if draw.category is not None:
        kinds.append((ElementKind.CATEGORY, None))
    kinds.extend((ElementKind.TAG, i) for i in range(len(draw.tags)))
    return kinds


@dataclass(frozen=True)
class LineIndex:
    """
    Start offset of every draw in the flat line space.

    Rebuilt after every structural change; never cached across edits.

    Attributes:
        starts: starts[i] is the first line of draw i
        total_lines: Sum of all draw line counts
    """

    starts: Tuple[int, ...]
    total_lines: int

    def locate(self, line: int) -> Optional[Tuple[int, int]]:
        """
        Map a line to (draw index, offset within that draw).

        Returns:
            None if line is outside [0, total_lines)
        """
        if line < 0 or line >= self.total_lines:
            return None
        draw_index = bisect_right(self.starts, line) - 1
        return draw_index, line - self.starts[draw_index]

    def line_of(self, draw_index: int, offset: int = 0) -> int:
        """Inverse of locate()."""
        return self.starts[draw_index] + offset

    def draw_range(self, draw_index: int) -> range:
        """Lines occupied by a draw."""
        end = (
            self.starts[draw_index + 1]
            if draw_index + 1 < len(self.starts)
            else self.total_lines
        )
        return range(self.starts[draw_index], end)


def build_line_index(draws: Sequence[DrawSpec]) -> LineIndex:
    """Accumulate draw line counts into a start-offset table."""
    starts = []
    total = 0
    for draw in draws:
        starts.append(total)
        total += draw.line_count
    return LineIndex(starts=tuple(starts), total_lines=total)


def classify(draws: Sequence[DrawSpec], line: int) -> Optional[Element]:
    """
    Classify a line of the draft.

    Single source of truth for what a line is; rendering, rotation and
    deletion all go through here.

    Args:
        draws: The draft
        line: Absolute line number

    Returns:
        Element for the line, or None if the draft is empty or line is
        out of range
    """
    location = build_line_index(draws).locate(line)
    if location is None:
        return None
    draw_index, offset = location
    kind, tag_index = element_kinds(draws[draw_index])[offset]
    return Element(kind=kind, draw_index=draw_index, offset=offset, tag_index=tag_index)
