"""Unit tests for the per-difference renderer and display records."""

import pytest

from linediff.diff.char_diff import Segment
from linediff.diff.renderers import render_records
from linediff.diff.renderers.per_difference import PerDifferenceRenderer, summary_text
from linediff.diff.renderers.records import DisplayRecord, mark_segments, side_segments
from linediff.diff.text_diff import compare_texts
from linediff.options import DiffOptions

SEPARATOR = "-" * 33


def _render(old_text, new_text, **option_values):
    options = DiffOptions(**option_values)
    result = compare_texts(old_text, new_text, options)
    return PerDifferenceRenderer(options).render(result.script, result.left, result.right)


@pytest.mark.unit
class TestDisplayRecord:
    """Tests for the record model helpers."""

    def test_text_joins_prefix_and_content(self):
        """Test the plain-text form."""
        assert DisplayRecord("deleted", prefix="-", content="line").text == "-line"

    def test_mark_segments(self):
        """Test inline markers for changed characters."""
        segments = (Segment("equal", "ab"), Segment("delete", "c"), Segment("insert", "d"))
        assert mark_segments(segments) == "ab[-c-]{+d+}"

    def test_side_segments(self):
        """Test each side keeps its own segments."""
        segments = (Segment("equal", "a"), Segment("delete", "b"), Segment("insert", "c"))
        assert side_segments(segments, "left") == (Segment("equal", "a"), Segment("delete", "b"))
        assert side_segments(segments, "right") == (Segment("equal", "a"), Segment("insert", "c"))


@pytest.mark.unit
class TestSummaryText:
    """Tests for the closing summary line."""

    def test_identical(self):
        """Test the identical message."""
        assert summary_text(compare_texts("a\n", "a\n").script) == "Files are identical."

    def test_counts_operations_not_lines(self):
        """Test a multi-line substitution counts once."""
        script = compare_texts("a\nb\nc\n", "x\ny\nc\n").script
        assert summary_text(script) == "Total differences 1"


@pytest.mark.unit
class TestPerDifferenceRenderer:
    """Tests for the PerDifferenceRenderer class."""

    def test_substitution_with_character_diff(self):
        """Test a full difference block with inline character markers."""
        records = _render("a\nb\nc\n", "a\nx\nc\n", character_diff=True)
        assert [record.text for record in records] == [
            "Difference at File1 line 2 / File2 line 2:",
            "File1: b",
            "File2: x",
            "Char diff: [-b-]{+x+}",
            SEPARATOR,
            "Total differences 1",
        ]

    def test_without_character_diff(self):
        """Test no char_diff record is emitted by default."""
        records = _render("a\nb\nc\n", "a\nx\nc\n")
        assert "char_diff" not in [record.kind for record in records]
        assert all(record.segments is None for record in records)

    def test_deletion_block(self):
        """Test a deletion names an empty right range."""
        records = _render("a\nb\nc\n", "a\nc\n")
        assert [record.text for record in records] == [
            "Difference at File1 line 2 / File2 none (after line 1):",
            "File1: b",
            SEPARATOR,
            "Total differences 1",
        ]

    def test_insertion_block(self):
        """Test an insertion lists only right lines."""
        records = _render("a\n", "a\nb\nc\n")
        assert [record.text for record in records] == [
            "Difference at File1 none (after line 1) / File2 lines 2-3:",
            "File2: b",
            "File2: c",
            SEPARATOR,
            "Total differences 1",
        ]

    def test_uneven_substitution_pairs_by_position(self):
        """Test lines are paired in order and the surplus is shown alone."""
        records = _render("a\nb\nz\n", "x\nz\n", character_diff=True)
        kinds = [record.kind for record in records]
        assert kinds == [
            "difference_header",
            "deleted",
            "inserted",
            "char_diff",
            "deleted",
            "separator",
            "summary",
        ]
        assert records[0].text == "Difference at File1 lines 1-2 / File2 line 1:"

    def test_missing_final_newline_is_marked(self):
        """Test a difference only in the final terminator is visible."""
        records = _render("one\nthree", "one\nthree\n", character_diff=True)
        assert [record.text for record in records] == [
            "Difference at File1 line 2 / File2 line 2:",
            "File1: three",
            "\\ No newline at end of file",
            "File2: three",
            "Char diff: three",
            SEPARATOR,
            "Total differences 1",
        ]
        assert records[2].kind == "no_newline"

    def test_identical(self):
        """Test identical inputs render only the summary."""
        records = _render("same\n", "same\n")
        assert [record.text for record in records] == ["Files are identical."]

    def test_line_numbers_on_records(self):
        """Test deleted and inserted records reference their source lines."""
        records = _render("a\nb\n", "a\nx\n")
        deleted = next(record for record in records if record.kind == "deleted")
        inserted = next(record for record in records if record.kind == "inserted")
        assert (deleted.left_line, deleted.right_line) == (2, None)
        assert (inserted.left_line, inserted.right_line) == (None, 2)

    def test_color_fills_styles(self):
        """Test styles are set only when color output is requested."""
        records = _render("a\n", "b\n", color_output=True)
        assert {record.kind: record.style for record in records}["difference_header"] == "bold yellow"
        assert all(record.style is None for record in _render("a\n", "b\n"))

    def test_char_diff_segments(self):
        """Test the char_diff record carries the full segment list."""
        records = _render("hello\n", "help\n", character_diff=True)
        char_record = next(record for record in records if record.kind == "char_diff")
        assert char_record.segments == (
            Segment("equal", "hel"),
            Segment("delete", "lo"),
            Segment("insert", "p"),
        )
        assert char_record.content == "hel[-lo-]{+p+}"


@pytest.mark.unit
class TestRenderRecords:
    """Tests for mode dispatch."""

    def test_default_mode_is_per_difference(self):
        """Test records come from the per-difference renderer by default."""
        options = DiffOptions()
        result = compare_texts("a\n", "b\n", options)
        records = render_records(result.script, result.left, result.right, options)
        assert records[0].kind == "difference_header"

    def test_unified_mode(self):
        """Test unified_format selects the unified renderer."""
        options = DiffOptions(unified_format=True)
        result = compare_texts("a\n", "b\n", options)
        records = render_records(result.script, result.left, result.right, options)
        assert records[0].kind == "file_header"

    def test_result_records_use_result_options(self):
        """Test DiffResult.records renders with the options of the comparison."""
        result = compare_texts("a\n", "b\n", DiffOptions(unified_format=True))
        assert [record.text for record in result.records()][:3] == ["--- old", "+++ new", "@@ -1 +1 @@"]
