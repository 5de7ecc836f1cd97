"""
Core Models Package

Data model shared by the sampling engine, the draft editor and the GUI.

| Model | Mutability | Notes |
|-------|------------|-------|
| `Power` | enum | Seven tiers, lowest first |
| `Mark` | frozen | Never changed after load |
| `Library` | mutable | Only availability flags change |
| `DrawSpec` | mutable | Edited in place inside a draft |
| `ResultEntry` | frozen | Copies of the draws it was made from |
| `ResultsHistory` | append-only | Cursor is UI state |
"""

from .power import Power
from .marks import Mark, PLACEHOLDER_NAME
from .library import Library, LibraryEntry
from .draws import DrawSpec
from .results import ResultEntry, ResultsHistory

__all__ = [
    "Power",
    "Mark",
    "PLACEHOLDER_NAME",
    "Library",
    "LibraryEntry",
    "DrawSpec",
    "ResultEntry",
    "ResultsHistory",
]
