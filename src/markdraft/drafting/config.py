"""
Module: drafting.config

Purpose:
    Configuration dataclass for a drafting session. Immutable
    configuration with validation on construction.

Key Classes:
    - SessionConfig: Seed, save location and editor defaults

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - drafting.session: Session construction
    - markdraft.__main__: Built from command-line arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from markdraft.core.models import Power


@dataclass(frozen=True)
class SessionConfig:
    """
    Configuration for a drafting session (immutable).

    Attributes:
        seed: Seed for the session's random stream; None draws from OS entropy
        save_dir: Directory snapshots are written to
        save_suffix: Extension appended to save names
        save_name_max_width: Longest accepted save name
        starting_quality: Value a quality constraint starts at when set

    Example:
        >>> config = SessionConfig(seed=7, save_dir=Path("saves"))
    """

    seed: Optional[int] = None
    save_dir: Path = field(default_factory=Path.cwd)
    save_suffix: str = ".json"
    save_name_max_width: int = 32
    starting_quality: Power = Power.SUPREME

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.save_suffix.startswith("."):
            raise ValueError(f"save_suffix must start with '.': {self.save_suffix!r}")
        if self.save_name_max_width <= 0:
            raise ValueError(
                f"save_name_max_width must be positive: {self.save_name_max_width}"
            )
        if not isinstance(self.starting_quality, Power):
            raise ValueError(f"starting_quality must be a Power: {self.starting_quality!r}")

    def save_path(self, name: str) -> Path:
        """Destination path for a snapshot saved under name."""
        return Path(self.save_dir) / f"{name}{self.save_suffix}"
