"""
Module: power

Purpose:
    Provides the Power enum - the seven-tier quality rating carried by
    every mark and optionally required by a draw specification.

Key Functions:
    - Power.from_label(text): Parse the literal used in library CSV files
    - Power.ordered(): All tiers, lowest to highest
    - Power.label: Human-readable label ("Bad Karma", "Poor", ...)

Dependencies:
    - enum (std)

Used By:
    - core.models.marks.Mark
    - core.models.draws.DrawSpec
    - drafting.sampling.sampler: quality matching
    - drafting.editor.rotation: quality rotation
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Power(Enum):
    """
    Quality tier of a mark.

    Declaration order is the tier order (lowest first). Ordering is only
    used for display and rotation, never for matching.

    The enum value is the member name as written in snapshot files.
    """

    BAD_KARMA = "BadKarma"
    POOR = "Poor"
    MODERATE = "Moderate"
    GOOD = "Good"
    GREAT = "Great"
    SUPREME = "Supreme"
    UNIQUE = "Unique"

    @classmethod
    def default(cls) -> Power:
        return cls.MODERATE

    @classmethod
    def ordered(cls) -> Tuple[Power, ...]:
        """All tiers in rotation order, lowest first."""
        return tuple(cls)

    @classmethod
    def from_label(cls, text: str) -> Power:
        """
        Parse a quality literal from a library CSV cell.

        Matching is exact: case and spelling must agree with the labels
        ("Bad Karma" has a space, unlike the serialized name).

        Args:
            text: Raw cell text

        Returns:
            Matching Power

        Raises:
            ValueError: If text is not one of the seven labels
        """
        for power in cls:
            if power.label == text:
                return power
        raise ValueError(f"Unknown power level {text!r}")

    @property
    def label(self) -> str:
        if self is Power.BAD_KARMA:
            return "Bad Karma"
        return self.value

    @property
    def rank(self) -> int:
        return Power.ordered().index(self)

    def __str__(self) -> str:
        return self.label
