"""
Mark Draft Core Package

Data models and persistence helpers. Nothing in here knows about the
editor, the sampling engine or the GUI.
"""

from .models import Power, Mark, Library, DrawSpec, ResultEntry, ResultsHistory

__all__ = [
    "Power",
    "Mark",
    "Library",
    "DrawSpec",
    "ResultEntry",
    "ResultsHistory",
]
