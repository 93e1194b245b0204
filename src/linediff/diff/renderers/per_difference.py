#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/per_difference.py
"""Renderer that reports each changed region on its own.

Every non-equal operation becomes a block: a header naming the line ranges
on both sides, the affected lines from each input, an optional character
diff for each substituted pair and a separator. A summary closes the output.
"""

from __future__ import annotations

from linediff.constants import (
    DEFAULT_LEFT_LABEL,
    DEFAULT_RIGHT_LABEL,
    IDENTICAL_MESSAGE,
    NO_NEWLINE_MARKER,
    SEPARATOR_LINE,
)
from linediff.diff.models import EditOp, EditScript, Line, LineSequence
from linediff.diff.renderers.records import DisplayRecord, RecordFactory, mark_segments
from linediff.options import DiffOptions


def summary_text(script: EditScript) -> str:
    """Closing line shared by all output modes."""
    if script.identical:
        return IDENTICAL_MESSAGE
    return f"Total differences {script.differences}"


class PerDifferenceRenderer:
    """Render an edit script one difference at a time.

    Parameters
    ----------
    options : DiffOptions
        ``color_output`` and ``character_diff`` decide which record fields are filled

    Examples
    --------
        >>> from linediff.diff import compare_texts
        >>> result = compare_texts("a\\nb\\n", "a\\nx\\n")
        >>> for record in PerDifferenceRenderer(result.options).render(result.script, result.left, result.right):
        ...     print(record.text)

    """

    def __init__(self, options: DiffOptions) -> None:
        self.options = options
        self._factory = RecordFactory(options)

    def render(self, script: EditScript, left: LineSequence, right: LineSequence) -> list[DisplayRecord]:
        """Render all differences followed by the summary line."""
        records: list[DisplayRecord] = []
        for op in script:
            if op.is_change:
                records.extend(self._render_op(op, left, right))
        records.append(self._factory.make("summary", summary_text(script)))
        return records

    def _render_op(self, op: EditOp, left: LineSequence, right: LineSequence) -> list[DisplayRecord]:
        make = self._factory.make
        header = f"Difference at {DEFAULT_LEFT_LABEL} {op.left.describe()} / {DEFAULT_RIGHT_LABEL} {op.right.describe()}:"
        records = [make("difference_header", header, left_line=op.left.start, right_line=op.right.start)]

        left_lines = left.slice(op.left)
        right_lines = right.slice(op.right)
        for position in range(max(len(left_lines), len(right_lines))):
            old = left_lines[position] if position < len(left_lines) else None
            new = right_lines[position] if position < len(right_lines) else None
            if old is not None:
                records.append(make("deleted", old.text, prefix=f"{DEFAULT_LEFT_LABEL}: ", left_line=old.index))
                records.extend(self._no_newline(old))
            if new is not None:
                records.append(make("inserted", new.text, prefix=f"{DEFAULT_RIGHT_LABEL}: ", right_line=new.index))
                records.extend(self._no_newline(new))
            if old is not None and new is not None:
                segments = self._factory.pair_segments(old, new)
                if segments is not None:
                    records.append(
                        make(
                            "char_diff",
                            mark_segments(segments),
                            prefix="Char diff: ",
                            left_line=old.index,
                            right_line=new.index,
                            segments=segments,
                        )
                    )

        records.append(make("separator", SEPARATOR_LINE))
        return records

    def _no_newline(self, line: Line) -> list[DisplayRecord]:
        if line.has_terminator:
            return []
        return [self._factory.make("no_newline", NO_NEWLINE_MARKER)]
