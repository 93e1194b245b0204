#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/models.py
"""Data model shared by the aligner and the renderers.

Lines and sequences are created once when the inputs are loaded and are
read-only afterwards. Edit scripts are produced by the aligner and only
consumed by the renderers. Line positions are 1-based throughout; character
offsets inside a line pair are 0-based.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

from linediff.constants import LINE_TERMINATORS, OpTag


def strip_terminator(raw: str) -> str:
    """Return ``raw`` without its trailing line terminator, if any."""
    for terminator in LINE_TERMINATORS:
        if raw.endswith(terminator):
            return raw[: -len(terminator)]
    return raw


@dataclass(frozen=True, slots=True)
class Line:
    """One input line.

    Attributes
    ----------
    index : int
        1-based position in the source
    raw : str
        Original text, including the trailing line terminator when present
    key : str
        Normalized comparison key

    """

    index: int
    raw: str
    key: str

    @property
    def text(self) -> str:
        """Display text without the line terminator."""
        return strip_terminator(self.raw)

    @property
    def has_terminator(self) -> bool:
        return self.raw.endswith(("\n", "\r"))


@dataclass(frozen=True)
class LineSequence:
    """Ordered, 1-indexed collection of :class:`Line` read from one source."""

    label: str
    lines: tuple[Line, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def at(self, index: int) -> Line:
        """Return the line at 1-based ``index``."""
        if index < 1 or index > len(self.lines):
            raise IndexError(f"line {index} out of range for {self.label} ({len(self.lines)} lines)")
        return self.lines[index - 1]

    def slice(self, line_range: LineRange) -> tuple[Line, ...]:
        """Return the lines covered by ``line_range``."""
        return self.lines[line_range.start - 1 : line_range.stop - 1]

    def keys(self) -> list[str]:
        return [line.key for line in self.lines]


class LineRange(NamedTuple):
    """A run of positions: ``count`` items starting at 1-based ``start``.

    An empty range (``count == 0``) marks the position before which
    lines are inserted or after which lines were deleted on that side.
    """

    start: int
    count: int

    @property
    def stop(self) -> int:
        """One past the last covered position."""
        return self.start + self.count

    @property
    def end(self) -> int:
        """Last covered position (``start - 1`` for an empty range)."""
        return self.start + self.count - 1

    def describe(self) -> str:
        """Human-readable form used in difference headers."""
        if self.count == 0:
            return f"none (after line {self.start - 1})"
        if self.count == 1:
            return f"line {self.start}"
        return f"lines {self.start}-{self.end}"


@dataclass(frozen=True, slots=True)
class EditOp:
    """One operation of an edit script.

    Both ranges are always present; the side an operation does not touch
    carries an empty range anchored at the current position, so that the
    ranges of a script concatenate to the full extent of each sequence.
    """

    tag: OpTag
    left: LineRange
    right: LineRange

    def __repr__(self) -> str:
        name = self.tag.capitalize()
        if self.tag == "delete":
            return f"{name}({_range_repr(self.left)})"
        if self.tag == "insert":
            return f"{name}({_range_repr(self.right)})"
        return f"{name}({_range_repr(self.left)},{_range_repr(self.right)})"

    @property
    def is_change(self) -> bool:
        return self.tag != "equal"

    def mirrored(self) -> EditOp:
        """Return the operation seen from the other side."""
        tag: OpTag = self.tag
        if tag == "delete":
            tag = "insert"
        elif tag == "insert":
            tag = "delete"
        return EditOp(tag, self.right, self.left)


def _range_repr(line_range: LineRange) -> str:
    if line_range.count == 1:
        return str(line_range.start)
    return f"{line_range.start}-{line_range.end}" if line_range.count else f"^{line_range.start}"


@dataclass(frozen=True, slots=True)
class CharEditOp:
    """Character-level operation within one substituted line pair.

    Offsets are 0-based and half-open: ``left_start:left_end`` in the left
    text, ``right_start:right_end`` in the right text.
    """

    tag: OpTag
    left_start: int
    left_end: int
    right_start: int
    right_end: int


@dataclass(frozen=True)
class EditScript:
    """Ordered edit operations transforming the left sequence into the right one.

    The operations' ranges partition ``1..left_length`` and ``1..right_length``
    in order, without gaps or overlaps.
    """

    ops: tuple[EditOp, ...]
    left_length: int
    right_length: int

    def __iter__(self) -> Iterator[EditOp]:
        return iter(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    @property
    def differences(self) -> int:
        """Number of non-equal operations."""
        return sum(1 for op in self.ops if op.is_change)

    @property
    def identical(self) -> bool:
        return self.differences == 0

    @property
    def lines_deleted(self) -> int:
        return sum(op.left.count for op in self.ops if op.is_change)

    @property
    def lines_inserted(self) -> int:
        return sum(op.right.count for op in self.ops if op.is_change)

    @property
    def lines_unchanged(self) -> int:
        return sum(op.left.count for op in self.ops if not op.is_change)

    def mirrored(self) -> EditScript:
        """Return the structural mirror (deletes and inserts swapped)."""
        return EditScript(tuple(op.mirrored() for op in self.ops), self.right_length, self.left_length)
