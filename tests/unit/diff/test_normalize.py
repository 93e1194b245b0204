"""Unit tests for line normalization into comparison keys."""

import pytest

from linediff.diff.normalize import build_line, build_sequence, normalize_line, strip_all_whitespace
from linediff.options import DiffOptions


@pytest.mark.unit
class TestStripAllWhitespace:
    """Tests for strip_all_whitespace function."""

    def test_removes_internal_whitespace(self):
        """Test that whitespace inside the line is removed, not only at the ends."""
        assert strip_all_whitespace("a b\tc") == "abc"

    def test_removes_line_terminators(self):
        """Test that newline characters count as whitespace."""
        assert strip_all_whitespace("ab\r\n") == "ab"

    def test_removes_unicode_whitespace(self):
        """Test that non-ASCII whitespace is removed too."""
        assert strip_all_whitespace("a\u00a0b\u2003c") == "abc"

    def test_empty_string(self):
        """Test empty input yields empty output."""
        assert strip_all_whitespace("") == ""


@pytest.mark.unit
class TestNormalizeLine:
    """Tests for normalize_line function."""

    def test_default_keeps_raw_text(self):
        """Test that without options the key is the raw line."""
        assert normalize_line("Hello World\n", DiffOptions()) == "Hello World\n"

    def test_ignore_whitespace(self):
        """Test the legacy remove-all-whitespace semantics."""
        options = DiffOptions(ignore_whitespace=True)
        assert normalize_line("a b", options) == normalize_line("ab", options)

    def test_ignore_case(self):
        """Test case folding."""
        options = DiffOptions(ignore_case=True)
        assert normalize_line("Hello", options) == normalize_line("hello", options)

    def test_ignore_case_uses_casefold(self):
        """Test Unicode-aware folding beyond ASCII lowercase."""
        options = DiffOptions(ignore_case=True)
        assert normalize_line("STRASSE", options) == normalize_line("straße", options)

    def test_ignore_case_keeps_whitespace(self):
        """Test that case folding alone does not touch whitespace."""
        assert normalize_line("A B\n", DiffOptions(ignore_case=True)) == "a b\n"

    def test_both_options(self):
        """Test whitespace removal combined with case folding."""
        options = DiffOptions(ignore_whitespace=True, ignore_case=True)
        assert normalize_line("  Foo  Bar \n", options) == "foobar"

    def test_empty_line(self):
        """Test that empty input never fails."""
        options = DiffOptions(ignore_whitespace=True, ignore_case=True)
        assert normalize_line("", options) == ""


@pytest.mark.unit
class TestBuildSequence:
    """Tests for build_line and build_sequence."""

    def test_build_line_keeps_raw(self):
        """Test that the raw text is kept next to the key."""
        line = build_line(3, "Hello\n", DiffOptions(ignore_case=True))
        assert line.index == 3
        assert line.raw == "Hello\n"
        assert line.key == "hello\n"

    def test_sequence_is_one_indexed(self):
        """Test line numbering starts at 1."""
        sequence = build_sequence(["a\n", "b\n"], DiffOptions(), "left")
        assert [line.index for line in sequence] == [1, 2]
        assert sequence.at(1).raw == "a\n"
        assert sequence.label == "left"

    def test_empty_sequence(self):
        """Test building from no lines."""
        sequence = build_sequence([], DiffOptions(), "empty")
        assert len(sequence) == 0
        assert sequence.keys() == []
