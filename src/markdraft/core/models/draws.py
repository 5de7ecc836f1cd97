"""
Module: draws

Purpose:
    Provides DrawSpec - one slot of a draft, constraining the quality,
    category and required tags of the mark to be drawn for it.

Key Functions:
    - DrawSpec.line_count: Number of display lines the spec occupies
    - DrawSpec.copy(): Independent snapshot (used when a draft is executed)

Dependencies:
    - dataclasses (std)
    - .power.Power

Used By:
    - drafting.sampling.sampler
    - drafting.editor: addressing, rotation, draft_editor
    - core.models.results.ResultEntry
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .power import Power


@dataclass
class DrawSpec:
    """
    Constraints for a single draw.

    Mutable: lives inside a draft and is edited in place. Results store
    copies so later edits never reach history.

    Attributes:
        power: Required quality, or None for any
        category: Required category, or None for any
        tags: Tags the drawn mark must all carry

    Invariants:
        - Editor operations keep tags distinct within one spec
    """

    power: Optional[Power] = None
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        """Header line plus one line per populated field and per tag."""
        return (
            1
            + (self.power is not None)
            + (self.category is not None)
            + len(self.tags)
        )

    @property
    def is_unconstrained(self) -> bool:
        return self.power is None and self.category is None and not self.tags

    def copy(self) -> DrawSpec:
        return DrawSpec(power=self.power, category=self.category, tags=list(self.tags))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "power": self.power.value if self.power is not None else None,
            "category": self.category,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> DrawSpec:
        power = data.get("power")
        return cls(
            power=Power(power) if power is not None else None,
            category=data.get("category"),
            tags=list(data.get("tags", [])),
        )
