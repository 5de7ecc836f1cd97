"""
Serialization Utilities

Provides to/from JSON utilities for session snapshots.

A snapshot holds the full library (marks, availability flags, category
and tag sets) and the full results history. The currently viewed result
index is UI state and is not written.

Layout (compatible with files written by earlier releases, which carry
no schema_version):

    {
      "schema_version": 1,
      "library": {"list": [[mark, available], ...],
                  "categories": [...], "tags": [...]},
      "results": {"results": [[[mark, ...], [draw, ...]], ...]}
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Tuple

from ..models.draws import DrawSpec
from ..models.library import Library, LibraryEntry
from ..models.marks import Mark
from ..models.results import ResultEntry, ResultsHistory
from ..schemas.validator import SNAPSHOT_SCHEMA_VERSION, ValidationError, validate_snapshot
from .file_locking import locked_write_json


# ─────────────────────────────────────────────────────────────────────────────
# Library
# ─────────────────────────────────────────────────────────────────────────────

def serialize_library(library: Library) -> dict[str, Any]:
    """
    Serialize a Library to a dictionary.

    Category and tag sets are written sorted so saves are stable.
    """
    return {
        "list": [[entry.mark.to_dict(), entry.available] for entry in library.entries],
        "categories": library.sorted_categories(),
        "tags": library.sorted_tags(),
    }


def deserialize_library(data: dict[str, Any]) -> Library:
    """
    Deserialize a Library from a dictionary.

    Stored category/tag sets are kept as written and extended with any
    category or tag found on a mark, so the index invariant holds even for
    hand-edited files.
    """
    library = Library(
        categories=set(data.get("categories", [])),
        tags=set(data.get("tags", [])),
    )
    for mark_data, available in data.get("list", []):
        library.add_mark(Mark.from_dict(mark_data), available=available)
    return library


# ─────────────────────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────────────────────

def serialize_results(results: ResultsHistory) -> dict[str, Any]:
    return {
        "results": [
            [[m.to_dict() for m in entry.marks], [d.to_dict() for d in entry.draws]]
            for entry in results.entries
        ]
    }


def deserialize_results(data: dict[str, Any]) -> ResultsHistory:
    entries = [
        ResultEntry(
            marks=tuple(Mark.from_dict(m) for m in marks),
            draws=tuple(DrawSpec.from_dict(d) for d in draws),
        )
        for marks, draws in data.get("results", [])
    ]
    return ResultsHistory(entries=entries)


# ─────────────────────────────────────────────────────────────────────────────
# Snapshot
# ─────────────────────────────────────────────────────────────────────────────

def serialize_snapshot(library: Library, results: ResultsHistory) -> dict[str, Any]:
    return {
        "schema_version": SNAPSHOT_SCHEMA_VERSION,
        "library": serialize_library(library),
        "results": serialize_results(results),
    }


def deserialize_snapshot(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> Tuple[Library, ResultsHistory]:
    """
    Deserialize a snapshot dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the structure first

    Returns:
        Tuple of (library, results history)

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_snapshot(data)
    return deserialize_library(data["library"]), deserialize_results(data["results"])


def load_snapshot_json(path: Path, *, validate: bool = True) -> Tuple[Library, ResultsHistory]:
    """
    Load a snapshot from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or not a snapshot
    """
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Snapshot is not valid JSON: {e}",
                path=str(path),
                errors=[str(e)],
            ) from e

    return deserialize_snapshot(data, validate=validate)


def save_snapshot_json(path: Path, library: Library, results: ResultsHistory) -> None:
    """
    Save a snapshot to a JSON file (exclusive lock held while writing).

    Args:
        path: Output path
        library: Library to persist
        results: Results history to persist
    """
    locked_write_json(path, serialize_snapshot(library, results))
