"""
Module: drafting.sampling.sampler

Purpose:
    Constrained random sampling engine. Resolves an ordered sequence of
    draw specifications into one concrete mark per specification.

Key Functions:
    - resolve_draws(): Main entry point for resolution
    - power_matches(): Quality matching rule
    - draw_matches(): Full per-mark filter for one draw

Key Classes:
    - Sampler: Orchestrates one resolution call

Algorithm:
    For each draw, in order:
    1. Build the candidate pool from available marks that pass the
       quality, category and tag filters and were not already chosen
       earlier in this call
    2. Pick one candidate uniformly at random
    3. If the pool is empty, use the placeholder mark instead
    4. Record the pick; rebuild the pool from scratch for the next draw

Dependencies:
    - random (std): Caller-owned generator
    - core.models: Library, Mark, DrawSpec, Power

Used By:
    - drafting.session: Draft execution
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set

from markdraft.core.models import DrawSpec, Library, Mark, Power

logger = logging.getLogger(__name__)

# A Bad Karma constraint is a ceiling: these tiers also satisfy it.
BAD_KARMA_ACCEPTS = frozenset({Power.BAD_KARMA, Power.POOR, Power.MODERATE})


def power_matches(required: Optional[Power], actual: Power) -> bool:
    """
    Check a mark's quality against a draw's quality constraint.

    Exact matches always pass. A Bad Karma constraint also accepts Poor
    and Moderate marks. No other pair cross-matches.

    Args:
        required: The draw's constraint, or None for no constraint
        actual: The mark's quality

    Returns:
        True if the mark satisfies the constraint
    """
    if required is None or required is actual:
        return True
    return required is Power.BAD_KARMA and actual in BAD_KARMA_ACCEPTS


def draw_matches(draw: DrawSpec, mark: Mark) -> bool:
    """True if mark passes the quality, category and tag filters of draw."""
    if not power_matches(draw.power, mark.power):
        return False
    if draw.category is not None and mark.category != draw.category:
        return False
    return mark.has_tags(draw.tags)


def resolve_draws(
    library: Library,
    draws: Sequence[DrawSpec],
    rng: random.Random,
) -> List[Mark]:
    """
    Resolve draws against library.

    Main entry point for sampling. Never fails: a draw with no qualifying
    mark resolves to the placeholder mark.

    Args:
        library: Library to draw from (not modified)
        draws: Draw specifications, resolved in order
        rng: Random stream owned by the caller; seed it for reproducibility

    Returns:
        One mark per draw, same order as draws

    Invariants:
        - len(result) == len(draws)
        - Non-placeholder results have pairwise-distinct names
        - Availability flags are never changed

    Example:
        >>> marks = resolve_draws(library, [DrawSpec(power=Power.GREAT)], random.Random(1))
        >>> marks[0].power
        <Power.GREAT: 'Great'>
    """
    sampler = Sampler(library, rng)
    return sampler.run(draws)


@dataclass
class Sampler:
    """
    State for one resolution call.

    Attributes:
        library: Library to draw from
        rng: Caller-owned random stream
    """

    library: Library
    rng: random.Random

    # Internal state
    _taken_names: Set[str] = field(init=False, default_factory=set)
    _fallbacks: int = field(init=False, default=0)

    def run(self, draws: Iterable[DrawSpec]) -> List[Mark]:
        """Resolve each draw in order, sharing the dedup set across them."""
        self._taken_names = set()
        self._fallbacks = 0

        resolved = [self._resolve_one(i, draw) for i, draw in enumerate(draws)]

        if self._fallbacks:
            logger.warning(
                f"{self._fallbacks}/{len(resolved)} draws had no qualifying mark "
                f"and resolved to the placeholder"
            )
        logger.debug(f"Resolved {len(resolved)} draws: {[m.name for m in resolved]}")
        return resolved

    def candidate_pool(self, draw: DrawSpec) -> List[Mark]:
        """
        Available marks that satisfy draw and were not already taken.

        Returns:
            Candidates in library order
        """
        return [
            mark
            for mark in self.library.available_marks()
            if draw_matches(draw, mark) and mark.name not in self._taken_names
        ]

    def _resolve_one(self, index: int, draw: DrawSpec) -> Mark:
        pool = self.candidate_pool(draw)
        logger.debug(f"Draw {index + 1}: {len(pool)} candidates")

        if not pool:
            self._fallbacks += 1
            return Mark.placeholder()

        choice = self.rng.choice(pool)
        self._taken_names.add(choice.name)
        return choice
