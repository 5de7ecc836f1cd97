"""
Module: drafting.loading.loader

Purpose:
    Load the starting state of a session from either a library CSV or a
    previously saved snapshot, chosen by file extension.

Key Functions:
    - load_session_file(): Dispatch on extension, return library + history

Dependencies:
    - drafting.loading.csv_loader: CSV parsing
    - core.utils.serialization: Snapshot parsing

Used By:
    - markdraft.__main__ / gui.app: Startup
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from markdraft.core.models import Library, ResultsHistory
from markdraft.core.schemas import ValidationError
from markdraft.core.utils.serialization import load_snapshot_json

from .csv_loader import LoaderError, parse_library_csv

logger = logging.getLogger(__name__)


def load_session_file(path: Path) -> Tuple[Library, ResultsHistory]:
    """
    Load a library (and any saved results) from path.

    - ``.csv``: library CSV, empty results history
    - ``.json``: snapshot written by a previous session

    Args:
        path: File to load

    Returns:
        Tuple of (library, results history). Every CSV mark is available;
        snapshot availability flags are restored as saved.

    Raises:
        LoaderError: On unknown extension, missing file or invalid content
    """
    path = Path(path)
    ext = path.suffix.lower()

    if ext == ".csv":
        return parse_library_csv(path), ResultsHistory()

    if ext == ".json":
        try:
            library, results = load_snapshot_json(path)
        except FileNotFoundError as e:
            raise LoaderError(str(e)) from e
        except (ValidationError, ValueError, OSError) as e:
            raise LoaderError(f"Failed to load snapshot {path}: {e}") from e
        logger.info(
            f"Restored {len(library)} marks and {len(results)} results from {path.name}"
        )
        return library, results

    if not ext:
        raise LoaderError(
            "You need to provide a path to a library csv/saved json to run this program"
        )
    raise LoaderError(f"Unknown library extension {ext[1:]}")
