"""
Module: marks

Purpose:
    Provides the Mark dataclass - a single catalog item that can be
    drawn. Marks are immutable once loaded into a library.

Key Functions:
    - Mark.placeholder(): The sentinel used when no mark qualifies
    - Mark.to_dict() / Mark.from_dict(): Snapshot serialization

Dependencies:
    - dataclasses (std)
    - .power.Power

Used By:
    - core.models.library.Library
    - core.models.results.ResultEntry
    - drafting.sampling.sampler
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet

from .power import Power


PLACEHOLDER_NAME = "STUPID"


@dataclass(frozen=True)
class Mark:
    """
    A named catalog item with a quality tier, category and tags.

    Attributes:
        name: Unique key within a library
        power: Quality tier
        category: Category string, may be empty
        tags: Set of free-form tags
        description: Free text shown alongside the mark

    Example:
        >>> m = Mark("Lucky Coin", Power.GOOD, "Trinket", frozenset({"gold"}))
        >>> m.has_tags(["gold"])
        True
    """

    name: str
    power: Power = Power.MODERATE
    category: str = ""
    tags: FrozenSet[str] = field(default_factory=frozenset)
    description: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable of tags but store a frozenset
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    @classmethod
    def placeholder(cls) -> Mark:
        """
        Sentinel result for a draw with an empty candidate pool.

        Returns:
            Mark with the fixed placeholder name, Poor quality and no
            category, tags or description
        """
        return cls(name=PLACEHOLDER_NAME, power=Power.POOR)

    @property
    def is_placeholder(self) -> bool:
        return self == Mark.placeholder()

    def has_tags(self, required) -> bool:
        """True if every required tag is present on this mark."""
        return all(tag in self.tags for tag in required)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "power": self.power.value,
            "category": self.category,
            "tags": sorted(self.tags),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Mark:
        return cls(
            name=data["name"],
            power=Power(data.get("power", Power.default().value)),
            category=data.get("category", ""),
            tags=frozenset(data.get("tags", [])),
            description=data.get("description", ""),
        )

    def __repr__(self) -> str:
        return f"Mark({self.name!r}, {self.power.label})"
