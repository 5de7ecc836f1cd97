"""
Module: results

Purpose:
    Provides ResultEntry and ResultsHistory - the append-only record of
    every draft execution with a single cyclic browsing cursor.

Key Classes:
    - ResultEntry: Resolved marks + the draw specs that produced them
    - ResultsHistory: Ordered entries plus the currently viewed index

Dependencies:
    - dataclasses (std)
    - .marks.Mark
    - .draws.DrawSpec

Used By:
    - drafting.session: Appends on execution, browses on input
    - core.utils.serialization: Snapshot persistence
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from .draws import DrawSpec
from .marks import Mark


@dataclass(frozen=True)
class ResultEntry:
    """
    Outcome of one draft execution (immutable).

    Attributes:
        marks: One resolved mark per draw, in draw order
        draws: Snapshot of the draw specs used

    Invariants:
        - len(marks) == len(draws)
    """

    marks: Tuple[Mark, ...]
    draws: Tuple[DrawSpec, ...]

    def __post_init__(self) -> None:
        if len(self.marks) != len(self.draws):
            raise ValueError(
                f"Result has {len(self.marks)} marks for {len(self.draws)} draws"
            )

    @classmethod
    def capture(cls, marks: Sequence[Mark], draws: Sequence[DrawSpec]) -> ResultEntry:
        """Build an entry from live draws, copying each spec."""
        return cls(marks=tuple(marks), draws=tuple(d.copy() for d in draws))


@dataclass
class ResultsHistory:
    """
    Append-only execution history with a wrapping selection cursor.

    The selected index is UI state only; it is not persisted.
    """

    entries: List[ResultEntry] = field(default_factory=list)
    selected: Optional[int] = None

    def append(self, entry: ResultEntry) -> int:
        """
        Append an entry and select it.

        Returns:
            Index of the new entry
        """
        self.entries.append(entry)
        self.selected = len(self.entries) - 1
        return self.selected

    def select_next(self) -> None:
        """Advance the cursor, wrapping from the last entry to the first."""
        if not self.entries:
            return
        if self.selected is None or self.selected >= len(self.entries) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def select_previous(self) -> None:
        """Retreat the cursor, wrapping from the first entry to the last."""
        if not self.entries:
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.entries) - 1
        else:
            self.selected -= 1

    @property
    def current(self) -> Optional[ResultEntry]:
        if self.selected is None or not self.entries:
            return None
        return self.entries[self.selected]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ResultEntry]:
        return iter(self.entries)
