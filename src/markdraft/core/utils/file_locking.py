"""
Module: core.utils.file_locking

Purpose:
    Write session snapshots while holding a portalocker lock, so two
    sessions saving under the same name cannot interleave their output.

Key Functions:
    - locked_file: Open a file with a lock held for the duration
    - locked_write_json: Replace a JSON document under an exclusive lock

Dependencies:
    - portalocker: Cross-platform advisory locks

Used By:
    - core.utils.serialization: save_snapshot_json()
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Dict, Iterator

import portalocker

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(
    path: Path,
    mode: str = "r",
    lock_type: int = portalocker.LOCK_EX,
) -> Iterator[IO[str]]:
    """
    Open path (creating parent directories) and lock it until the block exits.

    Raises:
        OSError: If the directory cannot be created or the file opened
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, mode, encoding="utf-8") as handle:
        portalocker.lock(handle, lock_type)
        try:
            yield handle
        finally:
            portalocker.unlock(handle)


def locked_write_json(path: Path, data: Dict[str, Any]) -> None:
    """Truncate path and dump data as UTF-8 JSON."""
    with locked_file(path, "w") as handle:
        json.dump(data, handle, ensure_ascii=False, indent=2)
        handle.flush()

    logger.debug(f"Wrote snapshot {path.name}")
