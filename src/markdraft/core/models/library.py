"""
Module: library

Purpose:
    Provides the Library - the entity store holding every mark in
    display/draw-priority order, each with an availability flag, plus the
    derived sets of distinct categories and tags.

Key Classes:
    - LibraryEntry: A mark paired with its availability flag
    - Library: Ordered entries + category/tag index sets

Dependencies:
    - dataclasses (std)
    - .marks.Mark

Used By:
    - drafting.loading: Populated from CSV or snapshot
    - drafting.sampling.sampler: Candidate pools
    - drafting.editor: Category/tag candidate sets
    - drafting.mark_list: Availability toggling
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set

from .marks import Mark


@dataclass
class LibraryEntry:
    """A mark and whether it can currently be drawn."""

    mark: Mark
    available: bool = True


@dataclass
class Library:
    """
    Ordered collection of marks with availability flags.

    Entries are NOT indexed by name; lookups are linear scans in entry
    order, which is also the order candidate pools are built in.

    Attributes:
        entries: Marks with availability, in display order
        categories: All distinct non-empty categories seen
        tags: All distinct tags seen

    Invariants:
        - Every non-empty category/tag on a mark added via add_mark()
          is present in the corresponding set
        - Availability is only changed by toggle_availability()/set_available()
    """

    entries: List[LibraryEntry] = field(default_factory=list)
    categories: Set[str] = field(default_factory=set)
    tags: Set[str] = field(default_factory=set)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def add_mark(self, mark: Mark, available: bool = True) -> None:
        """
        Append a mark and register its category and tags.

        Args:
            mark: Mark to append
            available: Initial availability flag
        """
        self.entries.append(LibraryEntry(mark, available))
        if mark.category:
            self.categories.add(mark.category)
        self.tags.update(mark.tags)

    def toggle_availability(self, index: int) -> bool:
        """
        Flip the availability flag of the entry at index.

        Returns:
            The new availability value

        Raises:
            IndexError: If index is out of range
        """
        entry = self.entries[index]
        entry.available = not entry.available
        return entry.available

    def set_available(self, index: int, available: bool) -> None:
        self.entries[index].available = available

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[LibraryEntry]:
        return iter(self.entries)

    @property
    def marks(self) -> List[Mark]:
        return [entry.mark for entry in self.entries]

    def available_marks(self) -> Iterator[Mark]:
        """Marks whose availability flag is set, in entry order."""
        for entry in self.entries:
            if entry.available:
                yield entry.mark

    def find(self, name: str) -> Optional[LibraryEntry]:
        for entry in self.entries:
            if entry.mark.name == name:
                return entry
        return None

    def sorted_categories(self) -> List[str]:
        """Categories in the library's canonical (sorted) order."""
        return sorted(self.categories)

    def sorted_tags(self) -> List[str]:
        """Tags in the library's canonical (sorted) order."""
        return sorted(self.tags)

    def __repr__(self) -> str:
        available = sum(1 for entry in self.entries if entry.available)
        return (
            f"Library(marks={len(self.entries)}, available={available}, "
            f"categories={len(self.categories)}, tags={len(self.tags)})"
        )
