"""
Core Utilities

Snapshot serialization and locked file writing.
"""

from .serialization import (
    serialize_library,
    deserialize_library,
    serialize_results,
    deserialize_results,
    serialize_snapshot,
    deserialize_snapshot,
    load_snapshot_json,
    save_snapshot_json,
)

__all__ = [
    "serialize_library",
    "deserialize_library",
    "serialize_results",
    "deserialize_results",
    "serialize_snapshot",
    "deserialize_snapshot",
    "load_snapshot_json",
    "save_snapshot_json",
]
