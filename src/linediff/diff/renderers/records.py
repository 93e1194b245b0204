#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/records.py
"""Display records emitted by the edit script renderers.

A record is one output line in structured form. The presentation layer
turns records into terminal text; renderers never emit escape sequences.
"""

from __future__ import annotations

from dataclasses import dataclass

from linediff.constants import (
    STYLE_DELETED,
    STYLE_DIFFERENCE_HEADER,
    STYLE_FILE_HEADER,
    STYLE_HUNK_HEADER,
    STYLE_INSERTED,
    STYLE_SUMMARY,
    RecordKind,
)
from linediff.diff.char_diff import Segment, char_segments
from linediff.diff.models import Line
from linediff.options import DiffOptions

_KIND_STYLES: dict[str, str] = {
    "file_header": STYLE_FILE_HEADER,
    "hunk_header": STYLE_HUNK_HEADER,
    "difference_header": STYLE_DIFFERENCE_HEADER,
    "deleted": STYLE_DELETED,
    "inserted": STYLE_INSERTED,
    "separator": "dim",
    "no_newline": "dim",
    "summary": STYLE_SUMMARY,
}


@dataclass(frozen=True, slots=True)
class DisplayRecord:
    """One rendered output line.

    Attributes
    ----------
    kind : str
        What the line represents (header, context, deleted line, ...)
    prefix : str
        Leading marker or label, e.g. ``"-"`` or ``"File1: "``
    content : str
        Remaining text of the line, without its terminator
    left_line, right_line : int or None
        1-based source line numbers the record refers to
    style : str or None
        Rich style name; set only when color output is enabled
    segments : tuple of Segment or None
        Character-level classification of ``content``; set only when
        character diffs are enabled and the record belongs to a substituted pair

    """

    kind: RecordKind
    prefix: str = ""
    content: str = ""
    left_line: int | None = None
    right_line: int | None = None
    style: str | None = None
    segments: tuple[Segment, ...] | None = None

    @property
    def text(self) -> str:
        """Plain-text form of the record."""
        return f"{self.prefix}{self.content}"


class RecordFactory:
    """Build records, populating optional fields according to the options."""

    def __init__(self, options: DiffOptions) -> None:
        self.options = options

    def make(
        self,
        kind: RecordKind,
        content: str = "",
        *,
        prefix: str = "",
        left_line: int | None = None,
        right_line: int | None = None,
        segments: tuple[Segment, ...] | None = None,
    ) -> DisplayRecord:
        return DisplayRecord(
            kind=kind,
            prefix=prefix,
            content=content,
            left_line=left_line,
            right_line=right_line,
            style=_KIND_STYLES.get(kind) if self.options.color_output else None,
            segments=segments if self.options.character_diff else None,
        )

    def pair_segments(self, left: Line, right: Line) -> tuple[Segment, ...] | None:
        """Character segments for a substituted pair, or None when disabled."""
        if not self.options.character_diff:
            return None
        return tuple(char_segments(left.text, right.text, max_cells=self.options.max_char_cells))


def mark_segments(segments: tuple[Segment, ...]) -> str:
    """Render segments as plain text with ``[-deleted-]`` and ``{+inserted+}`` markers."""
    parts: list[str] = []
    for segment in segments:
        if segment.kind == "delete":
            parts.append(f"[-{segment.text}-]")
        elif segment.kind == "insert":
            parts.append(f"{{+{segment.text}+}}")
        else:
            parts.append(segment.text)
    return "".join(parts)


def side_segments(segments: tuple[Segment, ...], side: str) -> tuple[Segment, ...]:
    """Keep the segments visible on one side of the pair (``"left"`` or ``"right"``)."""
    hidden = "insert" if side == "left" else "delete"
    return tuple(segment for segment in segments if segment.kind != hidden)
