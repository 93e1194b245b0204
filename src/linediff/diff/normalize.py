#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/normalize.py
"""Line normalization into comparison keys.

The key is what the aligner compares; the raw text is kept on the
:class:`~linediff.diff.models.Line` for display.
"""

from __future__ import annotations

from typing import Iterable

from linediff.diff.models import Line, LineSequence
from linediff.options import DiffOptions


def strip_all_whitespace(text: str) -> str:
    """Remove every whitespace character, including internal ones.

    Parameters
    ----------
    text : str
        Text to strip

    Returns
    -------
    str
        Text with all Unicode whitespace removed

    Examples
    --------
    >>> strip_all_whitespace("  a b\\tc\\n")
    'abc'

    """
    return "".join(text.split())


def normalize_line(raw: str, options: DiffOptions) -> str:
    """Produce the comparison key for one raw line.

    Whitespace removal is applied before case folding. With neither
    option set the key is the raw text itself, line terminator included.

    Parameters
    ----------
    raw : str
        Original line text
    options : DiffOptions
        Run configuration; only ``ignore_whitespace`` and ``ignore_case`` are read

    Returns
    -------
    str
        Canonical comparison key

    """
    key = raw
    if options.ignore_whitespace:
        key = strip_all_whitespace(key)
    if options.ignore_case:
        key = key.casefold()
    return key


def build_line(index: int, raw: str, options: DiffOptions) -> Line:
    """Create a :class:`Line` with its normalized key."""
    return Line(index=index, raw=raw, key=normalize_line(raw, options))


def build_sequence(raw_lines: Iterable[str], options: DiffOptions, label: str) -> LineSequence:
    """Create a 1-indexed :class:`LineSequence` from raw line texts.

    Parameters
    ----------
    raw_lines : iterable of str
        Lines in source order, terminators included
    options : DiffOptions
        Run configuration
    label : str
        Name of the source, used in headers and error messages

    Returns
    -------
    LineSequence
        Immutable sequence of normalized lines

    """
    lines = tuple(build_line(index, raw, options) for index, raw in enumerate(raw_lines, start=1))
    return LineSequence(label=label, lines=lines)
