#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/unified.py
"""Unified diff renderer.

Changes are grouped into hunks with a fixed number of surrounding context
lines. Hunks whose context would overlap or touch are merged, and each
hunk gets a ``@@ -l,c +l,c @@`` header following the GNU conventions: the
count is omitted when it is 1, and an empty range names the line before it.
"""

from __future__ import annotations

from dataclasses import dataclass

from linediff.constants import DEFAULT_CONTEXT_LINES, NO_NEWLINE_MARKER
from linediff.diff.models import EditOp, EditScript, Line, LineRange, LineSequence
from linediff.diff.renderers.per_difference import summary_text
from linediff.diff.renderers.records import DisplayRecord, RecordFactory, side_segments
from linediff.options import DiffOptions


@dataclass(frozen=True)
class Hunk:
    """A run of edit operations with their surrounding context.

    ``ops`` starts and ends with (possibly trimmed) equal operations when
    context is available; the covered ranges are contiguous on both sides.
    """

    ops: tuple[EditOp, ...]

    @property
    def left(self) -> LineRange:
        return LineRange(self.ops[0].left.start, sum(op.left.count for op in self.ops))

    @property
    def right(self) -> LineRange:
        return LineRange(self.ops[0].right.start, sum(op.right.count for op in self.ops))

    @property
    def header(self) -> str:
        return f"@@ -{format_range(self.left)} +{format_range(self.right)} @@"


def format_range(line_range: LineRange) -> str:
    """Format a hunk range the way ``diff -u`` does."""
    if line_range.count == 1:
        return str(line_range.start)
    start = line_range.start if line_range.count else line_range.start - 1
    return f"{start},{line_range.count}"


def _head(op: EditOp, size: int) -> EditOp:
    size = min(size, op.left.count)
    return EditOp(op.tag, LineRange(op.left.start, size), LineRange(op.right.start, size))


def _tail(op: EditOp, size: int) -> EditOp:
    size = min(size, op.left.count)
    return EditOp(op.tag, LineRange(op.left.stop - size, size), LineRange(op.right.stop - size, size))


def group_hunks(script: EditScript, context_lines: int = DEFAULT_CONTEXT_LINES) -> list[Hunk]:
    """Group the changes of a script into hunks.

    Parameters
    ----------
    script : EditScript
        Aligned script
    context_lines : int, default 3
        Equal lines kept before and after each run of changes

    Returns
    -------
    list of Hunk
        Hunks in order; empty when the script has no changes

    """
    if script.identical:
        return []

    hunks: list[Hunk] = []
    current: list[EditOp] = []
    last_index = len(script.ops) - 1
    for index, op in enumerate(script.ops):
        if op.is_change:
            current.append(op)
            continue
        if not current:
            # Leading context of the next hunk
            if index < last_index:
                current.append(_tail(op, context_lines))
            continue
        if index == last_index or op.left.count > 2 * context_lines:
            current.append(_head(op, context_lines))
            hunks.append(Hunk(_drop_empty(current)))
            current = []
            if index < last_index:
                current.append(_tail(op, context_lines))
        else:
            current.append(op)

    if any(op.is_change for op in current):
        hunks.append(Hunk(_drop_empty(current)))
    return hunks


def _drop_empty(ops: list[EditOp]) -> tuple[EditOp, ...]:
    return tuple(op for op in ops if op.is_change or op.left.count)


class UnifiedDiffRenderer:
    """Render an edit script as unified diff records.

    Parameters
    ----------
    options : DiffOptions
        Supplies ``context_lines``; ``color_output`` and ``character_diff``
        decide which record fields are filled

    Examples
    --------
        >>> from linediff import DiffOptions, compare_texts
        >>> options = DiffOptions(unified_format=True)
        >>> result = compare_texts("a\\nb\\n", "a\\nx\\n", options)
        >>> for record in UnifiedDiffRenderer(options).render(result.script, result.left, result.right):
        ...     print(record.text)

    """

    def __init__(self, options: DiffOptions) -> None:
        self.options = options
        self._factory = RecordFactory(options)

    def render(self, script: EditScript, left: LineSequence, right: LineSequence) -> list[DisplayRecord]:
        """Render file headers, hunks and the summary line."""
        make = self._factory.make
        records: list[DisplayRecord] = []
        hunks = group_hunks(script, self.options.context_lines)
        if hunks:
            records.append(make("file_header", left.label, prefix="--- "))
            records.append(make("file_header", right.label, prefix="+++ "))
        for hunk in hunks:
            records.append(
                make("hunk_header", hunk.header, left_line=hunk.left.start, right_line=hunk.right.start)
            )
            for op in hunk.ops:
                records.extend(self._render_op(op, left, right))
        records.append(make("summary", summary_text(script)))
        return records

    def _render_op(self, op: EditOp, left: LineSequence, right: LineSequence) -> list[DisplayRecord]:
        make = self._factory.make
        records: list[DisplayRecord] = []
        if op.tag == "equal":
            for line in left.slice(op.left):
                records.append(make("context", line.text, prefix=" ", left_line=line.index))
                records.extend(self._no_newline(line))
            return records

        old_lines = left.slice(op.left)
        new_lines = right.slice(op.right)
        pairs = [self._factory.pair_segments(old, new) for old, new in zip(old_lines, new_lines)]
        for position, line in enumerate(old_lines):
            segments = pairs[position] if position < len(pairs) else None
            records.append(
                make(
                    "deleted",
                    line.text,
                    prefix="-",
                    left_line=line.index,
                    segments=side_segments(segments, "left") if segments is not None else None,
                )
            )
            records.extend(self._no_newline(line))
        for position, line in enumerate(new_lines):
            segments = pairs[position] if position < len(pairs) else None
            records.append(
                make(
                    "inserted",
                    line.text,
                    prefix="+",
                    right_line=line.index,
                    segments=side_segments(segments, "right") if segments is not None else None,
                )
            )
            records.extend(self._no_newline(line))
        return records

    def _no_newline(self, line: Line) -> list[DisplayRecord]:
        if line.has_terminator:
            return []
        return [self._factory.make("no_newline", NO_NEWLINE_MARKER)]
