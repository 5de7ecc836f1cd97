"""
Module: drafting.loading.csv_loader

Purpose:
    Parse a library from a delimited tabular file with the fixed column
    order NAME, QUALITY, CATEGORY, TAG x k, DESCRIPTION, where k is the
    number of header columns literally named "TAG".

Key Functions:
    - parse_library_csv(): Load a Library from a CSV file
    - parse_library_rows(): Load a Library from already-split rows

Dependencies:
    - csv (std)
    - core.models: Library, Mark, Power

Used By:
    - drafting.loading.loader: Extension dispatch
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from markdraft.core.models import Library, Mark, Power

logger = logging.getLogger(__name__)

TAG_HEADER = "TAG"


class LoaderError(Exception):
    """Error loading a library or snapshot."""
    pass


def parse_library_csv(path: Path) -> Library:
    """
    Load a library from a CSV file.

    Process:
    1. Count header columns named exactly "TAG"
    2. For each non-empty row read name, quality, category, the tag
       cells and the description, in that order
    3. Register categories/tags; every mark starts available

    Args:
        path: Path to the CSV file

    Returns:
        Library with marks in file order

    Raises:
        LoaderError: If the file is unreadable or any row is malformed.
            No partial library is returned.

    Example:
        >>> library = parse_library_csv(Path("marks.csv"))
        >>> len(library)
        24
    """
    if not path.exists():
        raise LoaderError(f"Library file does not exist: {path}")

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LoaderError(f"Failed to read library csv {path}: {e}") from e

    library = parse_library_rows(rows)
    logger.info(
        f"Loaded {len(library)} marks, {len(library.categories)} categories, "
        f"{len(library.tags)} tags from {path.name}"
    )
    return library


def parse_library_rows(rows: Iterable[Sequence[str]]) -> Library:
    """
    Build a library from CSV rows, the first of which is the header.

    Raises:
        LoaderError: On a missing header, a row whose length differs from
            the header, or an unknown quality literal
    """
    rows = iter(rows)
    header = next(rows, None)
    if not header:
        raise LoaderError("Malformed library csv: missing header row")

    tag_count = sum(1 for column in header if column == TAG_HEADER)
    expected = 4 + tag_count
    if len(header) < expected:
        raise LoaderError(
            f"Malformed library csv: header has {len(header)} columns, "
            f"needs at least {expected} for {tag_count} TAG columns"
        )

    library = Library()
    for line_no, row in enumerate(rows, 2):
        if not row:
            continue
        if len(row) != len(header):
            raise LoaderError(
                f"Malformed library csv: line {line_no} has {len(row)} fields, "
                f"header has {len(header)}"
            )
        library.add_mark(_parse_row(row, tag_count, line_no))

    return library


def _parse_row(row: Sequence[str], tag_count: int, line_no: int) -> Mark:
    name, power_text, category = row[0], row[1], row[2]
    try:
        power = Power.from_label(power_text)
    except ValueError as e:
        raise LoaderError(f"Line {line_no}: {e}") from e

    tags: List[str] = [t for t in row[3:3 + tag_count] if t != ""]
    description = row[3 + tag_count]

    return Mark(
        name=name,
        power=power,
        category=category,
        tags=frozenset(tags),
        description=description,
    )
