"""
Module: drafting.sampling

Purpose:
    Constrained random sampling of marks for a draft.

Key Functions:
    - resolve_draws(): Main entry point
    - power_matches(): Quality matching rule (Bad Karma is a ceiling)
"""

from .sampler import Sampler, draw_matches, power_matches, resolve_draws

__all__ = [
    "Sampler",
    "draw_matches",
    "power_matches",
    "resolve_draws",
]
