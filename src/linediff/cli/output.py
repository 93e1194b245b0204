#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/cli/output.py
"""Presentation of display records as terminal text."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from rich.console import Console
from rich.text import Text

from linediff.constants import STYLE_SEGMENT_DELETE, STYLE_SEGMENT_INSERT
from linediff.diff.renderers.records import DisplayRecord

_SEGMENT_STYLES = {
    "delete": STYLE_SEGMENT_DELETE,
    "insert": STYLE_SEGMENT_INSERT,
}


def format_plain(records: Iterable[DisplayRecord]) -> str:
    """Join records into plain text, one line per record."""
    return "".join(f"{record.text}\n" for record in records)


def record_to_rich(record: DisplayRecord) -> Text:
    """Build a styled rich Text for one record.

    Character segments replace the plain content when present: unchanged
    characters keep the record style, deleted and inserted characters are
    emphasized.

    Parameters
    ----------
    record : DisplayRecord
        Record to convert

    Returns
    -------
    rich.text.Text
        Styled line

    """
    base_style = record.style or ""
    text = Text(record.prefix, style=base_style)
    if record.segments is None:
        text.append(record.content, style=base_style)
        return text
    for segment in record.segments:
        text.append(segment.text, style=_SEGMENT_STYLES.get(segment.kind, base_style))
    return text


def write_records(
    records: Iterable[DisplayRecord],
    stream: TextIO | None = None,
    *,
    use_color: bool = False,
    summary_stream: TextIO | None = None,
) -> None:
    """Write records to a stream, colored through rich when requested.

    Parameters
    ----------
    records : iterable of DisplayRecord
        Records to write, in order
    stream : TextIO, optional
        Destination (defaults to stdout)
    use_color : bool, default False
        Render styles and character segments with rich
    summary_stream : TextIO, optional
        Destination for ``summary`` records, when they should not be mixed
        into the main output (unified diffs)

    """
    target = stream or sys.stdout
    console = Console(file=target, force_terminal=True, highlight=False, soft_wrap=True) if use_color else None

    for record in records:
        if record.kind == "summary" and summary_stream is not None:
            print(record.text, file=summary_stream)
        elif console is not None:
            console.print(record_to_rich(record))
        else:
            print(record.text, file=target)
