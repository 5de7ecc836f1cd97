"""
Unit Tests for the Draft Editor

Covers navigation, field creation, deletion and rotation, both through
the direct methods and through logical keys.
"""

import random

import pytest

from markdraft.core.models import DrawSpec, Library, Mark, Power
from markdraft.drafting.editor import Direction, DraftEditor, ElementKind
from markdraft.drafting.keys import Key


@pytest.fixture
def editor() -> DraftEditor:
    """Draft with two draws: [header, power, category, tag] and [header]."""
    return DraftEditor(draws=[
        DrawSpec(power=Power.GOOD, category="Fire", tags=["hot"]),
        DrawSpec(),
    ])


def press(editor, library, *keys):
    return [editor.input(library, key) for key in keys]


class TestEmptyDraft:

    @pytest.mark.parametrize("key", [
        Key.UP, Key.DOWN, Key.PAGE_UP, Key.PAGE_DOWN,
        Key.LEFT, Key.RIGHT, Key.BACKSPACE, "p", "c", "t",
    ])
    def test_key_when_draft_empty_then_no_op(self, sample_library, key):
        editor = DraftEditor()

        assert editor.input(sample_library, key) is False

        assert editor.draws == []
        assert (editor.line, editor.scroll) == (0, 0)

    def test_add_when_draft_empty_then_appends_draw(self, sample_library):
        editor = DraftEditor()

        assert editor.input(sample_library, "a") is True

        assert editor.draws == [DrawSpec()]
        assert editor.current_element().kind is ElementKind.MARK


class TestNavigation:

    def test_move_down_saturates_at_last_line(self, editor):
        for _ in range(10):
            editor.move_down()
        assert editor.line == 4
        assert editor.move_down() is False

    def test_move_up_saturates_at_zero(self, editor):
        assert editor.move_up() is False
        assert editor.line == 0

    def test_scroll_is_independent_of_line(self, editor, sample_library):
        press(editor, sample_library, Key.PAGE_DOWN, Key.PAGE_DOWN)
        assert editor.scroll == 2
        assert editor.line == 0

    def test_scroll_down_clamps_to_last_line(self, editor):
        for _ in range(10):
            editor.scroll_down()
        assert editor.scroll == editor.total_lines - 1

    def test_uppercase_letter_acts_like_lowercase(self, sample_library):
        editor = DraftEditor()
        editor.input(sample_library, "A")
        assert len(editor.draws) == 1


class TestFieldCreation:

    def test_set_power_uses_starting_power(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec()])
        editor.input(sample_library, "p")
        assert editor.draws[0].power is Power.SUPREME

    def test_set_power_when_configured_then_uses_that_tier(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec()], starting_power=Power.POOR)
        editor.input(sample_library, "p")
        assert editor.draws[0].power is Power.POOR

    def test_set_power_when_already_set_then_resets(self, editor, sample_library):
        editor.input(sample_library, "p")
        assert editor.draws[0].power is Power.SUPREME

    def test_set_category_uses_first_sorted_category(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec(category="Water")])
        editor.input(sample_library, "c")
        assert editor.draws[0].category == "Fire"

    def test_set_category_when_library_has_none_then_no_op(self):
        library = Library()
        library.add_mark(Mark("A"))
        editor = DraftEditor(draws=[DrawSpec()])

        assert editor.set_category(library) is False
        assert editor.draws[0].category is None

    def test_add_tag_picks_first_unused(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec()])
        press(editor, sample_library, "t", "t", "t")
        assert editor.draws[0].tags == ["bright", "dark", "grey"]

    def test_add_tag_when_all_used_then_no_op(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec(tags=sample_library.sorted_tags())])
        assert editor.add_tag(sample_library) is False
        assert len(editor.draws[0].tags) == 5

    def test_field_edits_apply_to_draw_under_cursor(self, editor, sample_library):
        editor.line = 4
        editor.input(sample_library, "t")
        assert editor.draws[0].tags == ["hot"]
        assert editor.draws[1].tags == ["bright"]


class TestDelete:

    def test_delete_header_removes_draw_and_moves_up(self, editor, sample_library):
        editor.line = 4

        editor.input(sample_library, Key.BACKSPACE)

        assert len(editor.draws) == 1
        assert editor.line == 3

    def test_delete_power_clears_field_only(self, editor, sample_library):
        editor.line = 1

        editor.input(sample_library, Key.BACKSPACE)

        assert editor.draws[0].power is None
        assert editor.draws[0].category == "Fire"
        assert editor.line == 0

    def test_delete_category_and_tag(self, editor):
        editor.line = 3
        editor.delete_current()
        assert editor.draws[0].tags == []

        editor.line = 2
        editor.delete_current()
        assert editor.draws[0].category is None

    def test_delete_first_header_removes_whole_draw(self, editor):
        editor.delete_current()
        assert editor.draws == [DrawSpec()]
        assert editor.line == 0

    def test_delete_last_draw_leaves_cursor_in_range(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec()])

        editor.delete_current()

        assert editor.is_empty
        assert (editor.line, editor.scroll) == (0, 0)

    def test_delete_clamps_scroll(self, editor):
        editor.scroll = 4
        editor.line = 4
        editor.delete_current()
        assert editor.scroll <= editor.total_lines - 1


class TestRotation:

    def test_left_rotates_forward_right_backward(self, editor, sample_library):
        editor.line = 1

        editor.input(sample_library, Key.LEFT)
        assert editor.draws[0].power is Power.GREAT

        editor.input(sample_library, Key.RIGHT)
        editor.input(sample_library, Key.RIGHT)
        assert editor.draws[0].power is Power.MODERATE

    def test_power_wraps_around(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec(power=Power.UNIQUE)], line=1)
        editor.rotate(sample_library, Direction.FORWARD)
        assert editor.draws[0].power is Power.BAD_KARMA

    def test_category_rotates_through_sorted_categories(self, editor, sample_library):
        editor.line = 2
        editor.rotate(sample_library, Direction.FORWARD)
        assert editor.draws[0].category == "Royal"
        editor.rotate(sample_library, Direction.BACKWARD)
        editor.rotate(sample_library, Direction.BACKWARD)
        assert editor.draws[0].category == "Water"

    def test_header_line_not_rotatable(self, editor, sample_library):
        assert editor.rotate(sample_library, Direction.FORWARD) is False
        assert editor.draws[0] == DrawSpec(power=Power.GOOD, category="Fire", tags=["hot"])

    def test_tag_rotation_never_duplicates(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec(tags=["bright", "dark", "grey"])])
        for line in (1, 2, 3):
            editor.line = line
            for _ in range(7):
                editor.rotate(sample_library, Direction.FORWARD)
                tags = editor.draws[0].tags
                assert len(set(tags)) == len(tags)

    @pytest.mark.parametrize("seed", range(20))
    def test_mixed_key_sequence_keeps_tags_distinct_and_cursor_in_range(self, sample_library, seed):
        rng = random.Random(seed)
        keys = ["a", "t", "t", Key.LEFT, Key.RIGHT, Key.BACKSPACE, Key.UP, Key.DOWN, Key.PAGE_DOWN]
        editor = DraftEditor()

        for _ in range(300):
            editor.input(sample_library, rng.choice(keys))

            for draw in editor.draws:
                assert len(set(draw.tags)) == len(draw.tags)
            if not editor.is_empty:
                assert 0 <= editor.line < editor.total_lines
                assert 0 <= editor.scroll < editor.total_lines

    def test_tag_rotation_skips_tags_used_elsewhere(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec(tags=["bright", "dark"])], line=1)
        editor.rotate(sample_library, Direction.FORWARD)
        assert editor.draws[0].tags == ["grey", "dark"]

    def test_rotation_when_only_candidate_is_current_then_unchanged(self):
        library = Library()
        library.add_mark(Mark("A", category="Only", tags={"t"}))
        editor = DraftEditor(draws=[DrawSpec(category="Only", tags=["t"])], line=1)

        assert editor.rotate(library, Direction.FORWARD) is False
        editor.line = 2
        assert editor.rotate(library, Direction.FORWARD) is False

    def test_rotate_when_category_not_in_library_then_restarts(self, sample_library):
        editor = DraftEditor(draws=[DrawSpec(category="Gone")], line=1)
        editor.rotate(sample_library, Direction.BACKWARD)
        assert editor.draws[0].category == "Water"

    def test_rotation_keeps_line_count(self, editor, sample_library):
        before = editor.total_lines
        for line in range(before):
            editor.line = line
            editor.rotate(sample_library, Direction.FORWARD)
        assert editor.total_lines == before
