"""
Unit Tests for the Results History
"""

import pytest

from markdraft.core.models import DrawSpec, Mark, Power, ResultEntry, ResultsHistory


def make_entry(*names: str) -> ResultEntry:
    return ResultEntry.capture([Mark(n) for n in names], [DrawSpec() for _ in names])


class TestResultEntry:

    def test_init_when_lengths_differ_then_raises(self):
        with pytest.raises(ValueError, match="marks for"):
            ResultEntry(marks=(Mark("A"),), draws=())

    def test_capture_when_draws_edited_later_then_entry_unchanged(self):
        draws = [DrawSpec(power=Power.GOOD, tags=["t"])]
        entry = ResultEntry.capture([Mark("A")], draws)

        draws[0].power = None
        draws[0].tags.append("u")

        assert entry.draws[0].power is Power.GOOD
        assert entry.draws[0].tags == ["t"]


class TestResultsHistory:

    def test_append_selects_new_entry(self):
        history = ResultsHistory()
        assert history.append(make_entry("A")) == 0
        assert history.append(make_entry("B")) == 1
        assert history.selected == 1
        assert history.current.marks[0].name == "B"

    def test_select_next_when_at_last_then_wraps_to_first(self):
        history = ResultsHistory()
        history.append(make_entry("A"))
        history.append(make_entry("B"))
        history.append(make_entry("C"))

        history.select_next()

        assert history.selected == 0

    def test_select_previous_when_at_first_then_wraps_to_last(self):
        history = ResultsHistory(entries=[make_entry("A"), make_entry("B")], selected=0)

        history.select_previous()

        assert history.selected == 1

    def test_select_when_nothing_selected_then_selects_first(self):
        history = ResultsHistory(entries=[make_entry("A"), make_entry("B")])
        history.select_previous()
        assert history.selected == 0

        history = ResultsHistory(entries=[make_entry("A"), make_entry("B")])
        history.select_next()
        assert history.selected == 0

    def test_select_when_empty_then_no_op(self):
        history = ResultsHistory()
        history.select_next()
        history.select_previous()
        assert history.selected is None
        assert history.current is None
