#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/__init__.py
"""Line-alignment diff engine.

Inputs are loaded into sequences of normalized lines, aligned with a
longest-common-subsequence edit script and rendered per difference or as
unified hunks.

Key Features
------------
- LCS alignment: a single inserted or deleted line is reported once,
  not as a cascade of positional mismatches
- Deterministic delete-before-insert tie-break
- Optional linear-space alignment for large inputs
- Ignore-whitespace and ignore-case comparison keys
- Character-level highlighting inside changed line pairs

Examples
--------
Compare two files and print the unified diff:
    >>> from linediff import DiffOptions
    >>> from linediff.diff import compare_files
    >>> result = compare_files("a.txt", "b.txt", DiffOptions(unified_format=True))
    >>> for record in result.records():
    ...     print(record.text)

"""

from linediff.diff.aligner import align_keys, align_sequences, apply_edit_script, validate_edit_script
from linediff.diff.char_diff import Segment, align_characters, char_segments
from linediff.diff.models import CharEditOp, EditOp, EditScript, Line, LineRange, LineSequence
from linediff.diff.normalize import build_sequence, normalize_line
from linediff.diff.text_diff import (
    DiffResult,
    compare_files,
    compare_sequences,
    compare_texts,
    lines_from_text,
    load_lines,
)

__all__ = [
    "CharEditOp",
    "DiffResult",
    "EditOp",
    "EditScript",
    "Line",
    "LineRange",
    "LineSequence",
    "Segment",
    "align_characters",
    "align_keys",
    "align_sequences",
    "apply_edit_script",
    "build_sequence",
    "char_segments",
    "compare_files",
    "compare_sequences",
    "compare_texts",
    "lines_from_text",
    "load_lines",
    "normalize_line",
    "validate_edit_script",
]
