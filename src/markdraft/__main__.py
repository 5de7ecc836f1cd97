"""
Command-line entry point: ``python -m markdraft <library.csv|save.json>``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from markdraft.drafting.config import SessionConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdraft",
        description="Draft random marks from a library",
    )
    parser.add_argument("library", type=Path, help="Library CSV or saved session JSON")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the draw stream")
    parser.add_argument(
        "--save-dir", type=Path, default=Path.cwd(), help="Directory saves are written to"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser


def config_from_args(args: argparse.Namespace) -> SessionConfig:
    return SessionConfig(seed=args.seed, save_dir=args.save_dir)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from markdraft.gui.app import run

    return run(args.library, config_from_args(args))


if __name__ == "__main__":
    sys.exit(main())
