"""
Snapshot schema validation.
"""

from .validator import (
    SNAPSHOT_SCHEMA_VERSION,
    ValidationError,
    validate_draw,
    validate_mark,
    validate_snapshot,
)

__all__ = [
    "SNAPSHOT_SCHEMA_VERSION",
    "ValidationError",
    "validate_draw",
    "validate_mark",
    "validate_snapshot",
]
