"""
Snapshot Validation Utilities

Validates the structure of saved session snapshots before they are
deserialized.

- `validate_snapshot()` checks the top-level layout and every mark,
  entry and draw.
- Fail fast on the first structural violation; the loader turns the
  error into a `LoaderError` so no partial library is produced.
"""

from __future__ import annotations

from typing import Any

from ..models.power import Power


# Snapshot schema version written on save. Files written before versioning
# carry no version and are accepted as version 1.
SNAPSHOT_SCHEMA_VERSION = 1

_POWER_NAMES = {p.value for p in Power}


class ValidationError(Exception):
    """Raised when snapshot data fails structural validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_snapshot(data: Any) -> None:
    """
    Validate a decoded snapshot dictionary.

    Args:
        data: Result of decoding a snapshot JSON file

    Raises:
        ValidationError: If data does not have the snapshot structure
    """
    if not isinstance(data, dict):
        raise ValidationError("Snapshot must be a JSON object", path="")

    version = data.get("schema_version", SNAPSHOT_SCHEMA_VERSION)
    if version != SNAPSHOT_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported snapshot schema version: {version} "
            f"(expected {SNAPSHOT_SCHEMA_VERSION})",
            path="schema_version",
        )

    missing = [f for f in ("library", "results") if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    library = _require_dict(data["library"], "library")
    entries = _require_list(library.get("list"), "library.list")
    for i, entry in enumerate(entries):
        path = f"library.list[{i}]"
        if not (isinstance(entry, list) and len(entry) == 2):
            raise ValidationError("Entry must be a [mark, available] pair", path=path)
        validate_mark(entry[0], path=f"{path}[0]")
        if not isinstance(entry[1], bool):
            raise ValidationError("Availability must be a boolean", path=f"{path}[1]")

    _require_str_list(library.get("categories", []), "library.categories")
    _require_str_list(library.get("tags", []), "library.tags")

    results = _require_dict(data["results"], "results")
    for i, result in enumerate(_require_list(results.get("results", []), "results.results")):
        path = f"results.results[{i}]"
        if not (isinstance(result, list) and len(result) == 2):
            raise ValidationError("Result must be a [marks, draws] pair", path=path)
        marks = _require_list(result[0], f"{path}[0]")
        draws = _require_list(result[1], f"{path}[1]")
        if len(marks) != len(draws):
            raise ValidationError(
                f"Result has {len(marks)} marks for {len(draws)} draws", path=path
            )
        for j, mark in enumerate(marks):
            validate_mark(mark, path=f"{path}[0][{j}]")
        for j, draw in enumerate(draws):
            validate_draw(draw, path=f"{path}[1][{j}]")


def validate_mark(data: Any, *, path: str = "") -> None:
    """
    Validate one serialized mark.

    Raises:
        ValidationError: If fields are missing or mistyped
    """
    mark = _require_dict(data, path)
    if not isinstance(mark.get("name"), str):
        raise ValidationError("Mark name must be a string", path=f"{path}.name")
    power = mark.get("power", Power.default().value)
    if not _is_power_name(power):
        raise ValidationError(f"Unknown power {power!r}", path=f"{path}.power")
    for key in ("category", "description"):
        if not isinstance(mark.get(key, ""), str):
            raise ValidationError(f"Mark {key} must be a string", path=f"{path}.{key}")
    _require_str_list(mark.get("tags", []), f"{path}.tags")


def validate_draw(data: Any, *, path: str = "") -> None:
    """Validate one serialized draw specification."""
    draw = _require_dict(data, path)
    power = draw.get("power")
    if power is not None and not _is_power_name(power):
        raise ValidationError(f"Unknown power {power!r}", path=f"{path}.power")
    category = draw.get("category")
    if category is not None and not isinstance(category, str):
        raise ValidationError("Draw category must be a string or null", path=f"{path}.category")
    _require_str_list(draw.get("tags", []), f"{path}.tags")


def _is_power_name(value: Any) -> bool:
    return isinstance(value, str) and value in _POWER_NAMES


def _require_dict(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise ValidationError("Expected an object", path=path)
    return value


def _require_list(value: Any, path: str) -> list:
    if not isinstance(value, list):
        raise ValidationError("Expected an array", path=path)
    return value


def _require_str_list(value: Any, path: str) -> None:
    items = _require_list(value, path)
    bad = [i for i, item in enumerate(items) if not isinstance(item, str)]
    if bad:
        raise ValidationError(
            "Expected an array of strings",
            path=path,
            errors=[f"{path}[{i}] is not a string" for i in bad],
        )
