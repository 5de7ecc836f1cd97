"""
Module: drafting.loading

Purpose:
    Load libraries from CSV files and session snapshots.

Key Functions:
    - load_session_file(): Extension dispatch
    - parse_library_csv(): CSV library parsing

Key Classes:
    - LoaderError: Raised for any load failure
"""

from .csv_loader import LoaderError, parse_library_csv, parse_library_rows
from .loader import load_session_file

__all__ = [
    "LoaderError",
    "parse_library_csv",
    "parse_library_rows",
    "load_session_file",
]
