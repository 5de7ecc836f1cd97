"""
Module: drafting.editor

Purpose:
    Line-addressed draft editor: flat cursor over variable-shape draw
    specifications, value rotation, field creation and deletion.

Key Classes:
    - DraftEditor: Main editor
    - LineIndex / Element / ElementKind: Addressing results
    - Direction: Rotation direction
"""

from .addressing import (
    Element,
    ElementKind,
    LineIndex,
    build_line_index,
    classify,
    element_kinds,
)
from .draft_editor import DraftEditor
from .formatting import DraftLine, format_draft_lines, format_draw
from .rotation import (
    Direction,
    category_candidates,
    first_unused_tag,
    power_candidates,
    rotate_value,
    tag_candidates,
)

__all__ = [
    "Element",
    "ElementKind",
    "LineIndex",
    "build_line_index",
    "classify",
    "element_kinds",
    "DraftEditor",
    "DraftLine",
    "format_draft_lines",
    "format_draw",
    "Direction",
    "category_candidates",
    "first_unused_tag",
    "power_candidates",
    "rotate_value",
    "tag_candidates",
]
