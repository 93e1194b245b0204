"""Unit tests for character-level alignment."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linediff.diff.char_diff import Segment, align_characters, char_segments
from linediff.diff.models import CharEditOp
from linediff.exceptions import ResourceExceededError


def _side(segments, hidden):
    return "".join(segment.text for segment in segments if segment.kind != hidden)


@pytest.mark.unit
class TestAlignCharacters:
    """Tests for align_characters function."""

    def test_single_changed_character(self):
        """Test a one-character substitution with offsets."""
        assert align_characters("abc", "axc") == [
            CharEditOp("equal", 0, 1, 0, 1),
            CharEditOp("substitute", 1, 2, 1, 2),
            CharEditOp("equal", 2, 3, 2, 3),
        ]

    def test_identical_strings(self):
        """Test identical strings give one equal span."""
        assert align_characters("same", "same") == [CharEditOp("equal", 0, 4, 0, 4)]

    def test_limit_raises(self):
        """Test the per-pair budget is enforced."""
        with pytest.raises(ResourceExceededError):
            align_characters("abc", "xyz", max_cells=4)


@pytest.mark.unit
class TestCharSegments:
    """Tests for three-way character classification."""

    def test_three_way_classification(self):
        """Test unchanged, deleted and inserted characters are distinguished."""
        assert char_segments("abc", "axc") == [
            Segment("equal", "a"),
            Segment("delete", "b"),
            Segment("insert", "x"),
            Segment("equal", "c"),
        ]

    def test_suffix_change(self):
        """Test a change at the end of the line."""
        assert char_segments("hello", "help") == [
            Segment("equal", "hel"),
            Segment("delete", "lo"),
            Segment("insert", "p"),
        ]

    def test_pure_insertion(self):
        """Test inserted characters without deletions."""
        assert char_segments("ac", "abc") == [
            Segment("equal", "a"),
            Segment("insert", "b"),
            Segment("equal", "c"),
        ]

    def test_empty_left(self):
        """Test everything is inserted when the left text is empty."""
        assert char_segments("", "new") == [Segment("insert", "new")]

    def test_oversized_pair_falls_back_to_whole_line(self, caplog):
        """Test a pair over budget is shown as a whole-line change with a warning."""
        with caplog.at_level(logging.WARNING, logger="linediff.diff.char_diff"):
            segments = char_segments("abc", "xyz", max_cells=4)
        assert segments == [Segment("delete", "abc"), Segment("insert", "xyz")]
        assert any("whole-line change" in message for message in caplog.messages)

    def test_long_lines_are_not_truncated(self):
        """Test long lines survive intact."""
        left = "x" * 5000 + "a"
        right = "x" * 5000 + "b"
        segments = char_segments(left, right, max_cells=100)
        assert _side(segments, "insert") == left
        assert _side(segments, "delete") == right

    @pytest.mark.property
    @given(st.text(alphabet="ab c", max_size=20), st.text(alphabet="ab c", max_size=20))
    def test_segments_rebuild_both_sides(self, left, right):
        """Property: segments reassemble into both original strings."""
        segments = char_segments(left, right)
        assert _side(segments, "insert") == left
        assert _side(segments, "delete") == right
