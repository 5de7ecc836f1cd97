"""
Module: drafting.editor.rotation

Purpose:
    Candidate sets and cyclic stepping for editable draw fields.

Key Functions:
    - rotate_value(): Step a value through a candidate list
    - power_candidates(): All seven quality tiers
    - category_candidates(): Library categories
    - tag_candidates(): Library tags not used elsewhere in the draw
    - first_unused_tag(): Starting value for a newly added tag

Recovery policy:
    If the current value is not among the candidates (e.g. the library's
    tag set no longer contains it), stepping forward yields the first
    candidate and backward the last. An empty candidate list yields None
    and the caller leaves the field untouched.

Dependencies:
    - core.models: Power, Library, DrawSpec

Used By:
    - drafting.editor.draft_editor
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence, TypeVar

from markdraft.core.models import DrawSpec, Library, Power

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Direction(Enum):
    FORWARD = 1
    BACKWARD = -1


def rotate_value(current: T, candidates: Sequence[T], direction: Direction) -> Optional[T]:
    """
    Cyclically step current one place through candidates.

    Args:
        current: Value being rotated
        candidates: Ordered candidate values
        direction: FORWARD moves to the next candidate, BACKWARD to the previous

    Returns:
        The new value, or None if there are no candidates

    Example:
        >>> rotate_value("b", ["a", "b", "c"], Direction.FORWARD)
        'c'
        >>> rotate_value("a", ["a", "b", "c"], Direction.BACKWARD)
        'c'
    """
    if not candidates:
        return None
    try:
        index = list(candidates).index(current)
    except ValueError:
        logger.warning(
            f"Value {current!r} is not a rotation candidate; "
            f"restarting from the {'first' if direction is Direction.FORWARD else 'last'}"
        )
        return candidates[0] if direction is Direction.FORWARD else candidates[-1]
    return candidates[(index + direction.value) % len(candidates)]


def power_candidates() -> List[Power]:
    return list(Power.ordered())


def category_candidates(library: Library) -> List[str]:
    return library.sorted_categories()


def tag_candidates(library: Library, draw: DrawSpec, tag_index: int) -> List[str]:
    """
    Tags the tag at tag_index may rotate through.

    Excludes every tag used by the other tags of the same draw, so
    rotation can never produce a duplicate within one draw.
    """
    others = {t for i, t in enumerate(draw.tags) if i != tag_index}
    return [t for t in library.sorted_tags() if t not in others]


def first_unused_tag(library: Library, draw: DrawSpec) -> Optional[str]:
    """First library tag not already on draw, or None if all are used."""
    used = set(draw.tags)
    for tag in library.sorted_tags():
        if tag not in used:
            return tag
    return None
