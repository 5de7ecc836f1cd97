"""
Module: drafting

Purpose:
    Everything between loading a library and showing results: the
    sampling engine, the line-addressed draft editor, the mark list and
    the session that routes input between them.

Key Classes:
    - Session: Top-level state owner and key dispatcher
    - SessionConfig: Session configuration
    - DraftEditor: Line-addressed draft editor

Key Functions:
    - resolve_draws(): Sampling engine entry point
    - load_session_file(): Library / snapshot loading
"""

from .config import SessionConfig
from .editor import DraftEditor, Direction
from .keys import Key
from .loading import LoaderError, load_session_file
from .mark_list import MarkList
from .sampling import resolve_draws
from .session import InputOutcome, Pane, SaveError, Session, Tab

__all__ = [
    "SessionConfig",
    "DraftEditor",
    "Direction",
    "Key",
    "LoaderError",
    "load_session_file",
    "MarkList",
    "resolve_draws",
    "InputOutcome",
    "Pane",
    "SaveError",
    "Session",
    "Tab",
]
