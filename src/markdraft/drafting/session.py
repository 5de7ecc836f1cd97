"""
Module: drafting.session

Purpose:
    Top-level drafting session. Owns the library, the random stream, the
    draft editor, the mark list and the results history, and routes each
    logical key to exactly one of them.

Key Classes:
    - Session: State owner and key dispatcher
    - InputOutcome: Intent returned to the presentation layer
    - Tab / Pane: Which component currently receives input
    - SaveError: Exception for snapshot write failures

Dispatch order:
    1. s            -> SAVE_REQUESTED (UI asks for a name, calls save())
    2. Esc, q       -> QUIT
    3. d / r        -> Draft / Results tab
    4. Enter        -> execute() when the draft pane of the Draft tab is active
    5. Draft tab    -> Tab switches pane; other keys go to editor or mark list
    6. Results tab  -> Up / Down browse history

Dependencies:
    - random (std): Session-owned stream
    - drafting.editor, drafting.sampling, drafting.mark_list
    - core.utils.serialization: Snapshot saving

Used By:
    - gui.main_window
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from pathlib import Path
from typing import List, Optional

from markdraft.core.models import Library, Mark, ResultEntry, ResultsHistory
from markdraft.core.utils.serialization import save_snapshot_json

from .config import SessionConfig
from .editor import DraftEditor
from .keys import Key, KeyInput, normalize_char
from .mark_list import MarkList
from .sampling import resolve_draws

logger = logging.getLogger(__name__)


class SaveError(Exception):
    """Error writing a session snapshot."""
    pass


class InputOutcome(Enum):
    CONTINUE = "continue"
    QUIT = "quit"
    SAVE_REQUESTED = "save_requested"


class Tab(Enum):
    DRAFT = "draft"
    RESULTS = "results"


class Pane(Enum):
    DRAFT = "draft"
    MARKS = "marks"


class Session:
    """
    Single-user drafting session.

    Attributes:
        library: Library for the lifetime of the session
        config: Session configuration
        rng: The one random stream every execution draws from
        results: Execution history
        editor: Draft editor
        mark_list: Marks pane cursor
        tab: Active tab
        pane: Active pane within the Draft tab

    Example:
        >>> session = Session(library, config=SessionConfig(seed=1))
        >>> session.input("a")
        <InputOutcome.CONTINUE: 'continue'>
        >>> session.input(Key.ENTER)
        <InputOutcome.CONTINUE: 'continue'>
        >>> len(session.results)
        1
    """

    def __init__(
        self,
        library: Library,
        results: Optional[ResultsHistory] = None,
        config: Optional[SessionConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.library = library
        self.config = config or SessionConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.results = results if results is not None else ResultsHistory()
        self.editor = DraftEditor(starting_power=self.config.starting_quality)
        self.mark_list = MarkList(n_items=len(library))
        self.tab = Tab.DRAFT
        self.pane = Pane.DRAFT

    # ─────────────────────────────────────────────────────────────────────────
    # Input
    # ─────────────────────────────────────────────────────────────────────────

    def input(self, key: KeyInput) -> InputOutcome:
        """
        Process one logical key.

        Args:
            key: A Key member or a one-character string

        Returns:
            Intent for the presentation layer
        """
        char = normalize_char(key)

        if char == "s":
            return InputOutcome.SAVE_REQUESTED
        if key is Key.ESCAPE or char == "q":
            return InputOutcome.QUIT
        if char == "d":
            self.tab = Tab.DRAFT
            return InputOutcome.CONTINUE
        if char == "r":
            self.tab = Tab.RESULTS
            return InputOutcome.CONTINUE

        if self.tab is Tab.DRAFT:
            if key is Key.ENTER and self.pane is Pane.DRAFT:
                self.execute()
            elif key is Key.TAB:
                self.pane = Pane.MARKS if self.pane is Pane.DRAFT else Pane.DRAFT
            elif self.pane is Pane.DRAFT:
                self.editor.input(self.library, key)
            else:
                self.mark_list.input(self.library, key)
        elif self.tab is Tab.RESULTS:
            if key is Key.UP:
                self.results.select_previous()
            elif key is Key.DOWN:
                self.results.select_next()

        return InputOutcome.CONTINUE

    # ─────────────────────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────────────────────

    def execute(self) -> List[Mark]:
        """
        Resolve the current draft and record the outcome.

        The draft is not consumed, so the same draft can be re-rolled.
        The new result is selected and the Results tab shown.

        Returns:
            Resolved marks, one per draw
        """
        draws = [draw.copy() for draw in self.editor.draws]
        marks = resolve_draws(self.library, draws, self.rng)
        index = self.results.append(ResultEntry.capture(marks, draws))
        self.tab = Tab.RESULTS
        logger.info(f"Draft #{index}: {', '.join(m.name for m in marks) or '<empty>'}")
        return marks

    def save(self, name: str) -> Path:
        """
        Write a snapshot of the library and results as <name><suffix>.

        Saving reads session state only; nothing is mutated.

        Args:
            name: Save name without extension

        Returns:
            Path written

        Raises:
            SaveError: If the name is invalid or the file cannot be written
        """
        name = name.strip()
        if not name:
            raise SaveError("Save name must not be empty")
        if len(name) > self.config.save_name_max_width:
            raise SaveError(
                f"Save name longer than {self.config.save_name_max_width} characters"
            )
        if name in (".", "..") or any(sep in name for sep in ("/", "\\")):
            raise SaveError(f"Save name must not contain path separators: {name!r}")

        path = self.config.save_path(name)
        try:
            save_snapshot_json(path, self.library, self.results)
        except (OSError, TypeError, ValueError) as e:
            raise SaveError(f"Failed to save {path}: {e}") from e

        logger.info(f"Saved session to {path}")
        return path
