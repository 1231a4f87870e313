"""
Tests for the collapsible notes list.

The text widget is a MagicMock, so only the calls made on it are checked.
"""

from unittest.mock import MagicMock

import pytest

from scholarnotes.ui.note_view import COLLAPSED_MARKER, EXPANDED_MARKER, CollapsibleNotes

ENTRIES = (("Chapter 1 Summary", "**Cells** divide"), ("Chapter 2 Summary", "Energy"))


def inserted_text(view):
    return "".join(call.args[1] for call in view.insert.call_args_list)


@pytest.fixture
def notes():
    view = MagicMock()
    notes = CollapsibleNotes(view)
    notes.set_entries(ENTRIES)
    return notes


class TestCollapsibleNotes:
    """Expand and collapse entries by title."""

    def test_entries_start_collapsed(self, notes):
        text = inserted_text(notes.view)

        assert COLLAPSED_MARKER + "Chapter 1 Summary\n" in text
        assert "Cells" not in text
        assert not notes.is_expanded("Chapter 1 Summary")

    def test_toggle_expands_one_entry(self, notes):
        notes.view.reset_mock()
        notes.toggle("Chapter 1 Summary")
        text = inserted_text(notes.view)

        assert EXPANDED_MARKER + "Chapter 1 Summary\n" in text
        assert "Cells divide" in text
        assert COLLAPSED_MARKER + "Chapter 2 Summary\n" in text
        assert "Energy" not in text

    def test_toggle_twice_collapses(self, notes):
        notes.toggle("Chapter 1 Summary")
        notes.toggle("Chapter 1 Summary")
        assert not notes.is_expanded("Chapter 1 Summary")

    def test_body_keeps_markup_tags(self, notes):
        notes.view.reset_mock()
        notes.toggle("Chapter 1 Summary")

        bold = [c for c in notes.view.insert.call_args_list if c.args[1] == "Cells"]
        assert bold[0].args[2] == ("bold", "body")

    def test_title_click_toggles(self, notes):
        bindings = {c.args[0]: c.args[2] for c in notes.view.tag_bind.call_args_list}

        bindings["entry-1"](None)

        assert notes.is_expanded("Chapter 2 Summary")

    def test_widget_left_read_only(self, notes):
        notes.view.configure.assert_called_with(state="disabled")

    def test_new_entries_reset_expansion(self, notes):
        notes.toggle("Chapter 1 Summary")
        notes.set_entries(ENTRIES)
        assert notes.expanded == set()
