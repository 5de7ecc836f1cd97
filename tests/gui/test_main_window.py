"""Tests for the main window: key translation, rendering and save flow."""

import logging
from unittest.mock import patch

import pytest
from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtTest import QTest

from markdraft.drafting import InputOutcome, Pane, Session, SessionConfig, Tab
from markdraft.drafting.keys import Key
from markdraft.gui.main_window import MainWindow, key_from_event
from markdraft.gui.widgets.results_panel import EMPTY_TEXT


@pytest.fixture
def window(qtbot, sample_library, tmp_path):
    """Create a MainWindow around a seeded session."""
    session = Session(sample_library, config=SessionConfig(seed=1, save_dir=tmp_path))
    win = MainWindow(session)
    qtbot.addWidget(win)
    win.show()
    return win


def key_event(key, text=""):
    return QKeyEvent(QEvent.Type.KeyPress, int(key), Qt.KeyboardModifier.NoModifier, text)


class TestKeyFromEvent:

    def test_special_keys_map_to_logical_keys(self, qtbot):
        assert key_from_event(key_event(Qt.Key.Key_Up)) is Key.UP
        assert key_from_event(key_event(Qt.Key.Key_Return, "\r")) is Key.ENTER
        assert key_from_event(key_event(Qt.Key.Key_Enter, "\r")) is Key.ENTER
        assert key_from_event(key_event(Qt.Key.Key_Backspace, "\b")) is Key.BACKSPACE

    def test_printable_keys_pass_text(self, qtbot):
        assert key_from_event(key_event(Qt.Key.Key_A, "a")) == "a"
        assert key_from_event(key_event(Qt.Key.Key_P, "P")) == "P"

    def test_modifier_only_keys_ignored(self, qtbot):
        assert key_from_event(key_event(Qt.Key.Key_Shift)) is None


class TestDraftTab:

    def test_typing_a_adds_draw_line(self, window):
        QTest.keyClick(window, Qt.Key.Key_A)

        assert window.draft_panel.list.count() == 1
        assert window.draft_panel.list.item(0).text() == "Draw 1"

    def test_field_lines_rendered_in_order(self, window):
        for key in ("a", "p", "c", "t"):
            window.handle_key(key)

        texts = [window.draft_panel.list.item(i).text() for i in range(window.draft_panel.list.count())]
        assert texts == ["Draw 1", ">> Power: Supreme", ">> Category: Fire", ">> Tag: bright"]

    def test_tab_key_switches_to_marks_pane(self, window):
        QTest.keyClick(window, Qt.Key.Key_Tab)

        assert window.session.pane is Pane.MARKS
        assert window.mark_table.isEnabled()
        assert not window.draft_panel.isEnabled()

    def test_toggling_mark_strikes_it_out(self, window):
        for key in (Key.TAB, Key.DOWN, Key.ENTER):
            window.handle_key(key)

        assert window.mark_table.table.item(0, 0).font().strikeOut()
        assert not window.mark_table.table.item(1, 0).font().strikeOut()

    def test_mark_table_lists_library(self, window):
        assert window.mark_table.table.rowCount() == 6
        assert window.mark_table.table.item(3, 1).text() == "Bad Karma"


class TestResultsTab:

    def test_results_tab_when_empty_shows_placeholder(self, window):
        window.handle_key("r")

        assert window.stack.currentIndex() == 1
        assert window.results_panel.history_list.item(0).text() == EMPTY_TEXT

    def test_enter_executes_and_shows_results(self, window):
        window.handle_key("a")
        window.handle_key(Key.ENTER)

        assert window.session.tab is Tab.RESULTS
        assert window.tab_bar.currentIndex() == 1
        assert window.results_panel.history_list.item(0).text() == "Draft #0"
        assert window.results_panel.marks_list.count() == 1
        assert window.results_panel.draws_list.item(0).text() == "Draw 1"

    def test_clicking_tab_switches_session_tab(self, window):
        window.tab_bar.setCurrentIndex(1)
        assert window.session.tab is Tab.RESULTS


class TestSaveAndQuit:

    def test_save_prompt_writes_file(self, window, tmp_path):
        with patch("markdraft.gui.main_window.QInputDialog.getText", return_value=("snap", True)):
            outcome = window.handle_key("s")

        assert outcome is InputOutcome.SAVE_REQUESTED
        assert (tmp_path / "snap.json").exists()

    def test_save_prompt_cancelled_writes_nothing(self, window, tmp_path):
        with patch("markdraft.gui.main_window.QInputDialog.getText", return_value=("snap", False)):
            window.handle_key("s")

        assert not (tmp_path / "snap.json").exists()

    def test_save_failure_shows_warning(self, window):
        with patch("markdraft.gui.main_window.QMessageBox.warning") as mock_warning:
            assert window.save_as("   ") is False

        mock_warning.assert_called_once()

    def test_quit_closes_window(self, window):
        assert window.handle_key("q") is InputOutcome.QUIT
        assert not window.isVisible()


class TestConsole:

    def test_logged_warnings_reach_console(self, window):
        logging.getLogger("markdraft.drafting").warning("pool is running dry")

        window.refresh()

        assert "pool is running dry" in window.console.text_edit.toPlainText()
