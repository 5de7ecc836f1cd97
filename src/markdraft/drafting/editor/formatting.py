"""
Rendered line model for drafts.

`format_draft_lines()` produces exactly one DraftLine per addressable line,
in the order defined by `addressing.element_kinds`, so the GUI can
highlight `editor.line` by position alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from markdraft.core.models import DrawSpec, Power

from .addressing import ElementKind, element_kinds


@dataclass(frozen=True)
class DraftLine:
    text: str
    kind: ElementKind
    draw_index: int
    power: Optional[Power] = None


def label_text(label: str, text: str) -> str:
    return f"{label}: {text}"


def format_draw(draw: DrawSpec, draw_index: int) -> List[DraftLine]:
    lines = []
    for kind, tag_index in element_kinds(draw):
        if kind is ElementKind.MARK:
            lines.append(DraftLine(f"Draw {draw_index + 1}", kind, draw_index))
        elif kind is ElementKind.POWER:
            lines.append(DraftLine(
                label_text(">> Power", draw.power.label), kind, draw_index, draw.power
            ))
        elif kind is ElementKind.CATEGORY:
            lines.append(DraftLine(label_text(">> Category", draw.category), kind, draw_index))
        else:
            lines.append(DraftLine(label_text(">> Tag", draw.tags[tag_index]), kind, draw_index))
    return lines


def format_draft_lines(draws: Sequence[DrawSpec]) -> List[DraftLine]:
    lines: List[DraftLine] = []
    for i, draw in enumerate(draws):
        lines.extend(format_draw(draw, i))
    return lines
