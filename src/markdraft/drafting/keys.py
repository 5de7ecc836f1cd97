"""
Logical key identities consumed by the drafting session.

The presentation layer translates raw device events into these values;
the core never sees timing or modifier information. Printable keys are
passed as one-character strings.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Union


class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    BACKSPACE = auto()
    ENTER = auto()
    TAB = auto()
    ESCAPE = auto()


KeyInput = Union[Key, str]


def normalize_char(key: KeyInput) -> str | None:
    """Lower-cased character for printable keys, None for special keys."""
    if isinstance(key, str) and len(key) == 1:
        return key.lower()
    return None
