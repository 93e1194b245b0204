#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for linediff.

This module centralizes the literal types, default option values and
display strings used across the comparison pipeline.

Constants are organized by category:
1. Type Definitions - Literal types used by the models and options
2. Alignment Defaults - Strategy and resource thresholds
3. Rendering Defaults - Context size and fixed display strings
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OpTag = Literal["equal", "delete", "insert", "substitute"]
AlignmentStrategy = Literal["table", "linear"]
RecordKind = Literal[
    "file_header",
    "hunk_header",
    "difference_header",
    "context",
    "deleted",
    "inserted",
    "char_diff",
    "separator",
    "no_newline",
    "summary",
]
SegmentKind = Literal["equal", "delete", "insert"]

# =============================================================================
# Alignment Defaults
# =============================================================================

DEFAULT_STRATEGY: AlignmentStrategy = "table"
DEFAULT_MAX_ALIGNMENT_CELLS = 10_000_000
DEFAULT_MAX_CHAR_CELLS = 1_000_000
DEFAULT_ENCODING = "utf-8"

LINE_TERMINATORS = ("\r\n", "\n", "\r")

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_CONTEXT_LINES = 3
DEFAULT_LEFT_LABEL = "File1"
DEFAULT_RIGHT_LABEL = "File2"

SEPARATOR_LINE = "---------------------------------"
IDENTICAL_MESSAGE = "Files are identical."
NO_NEWLINE_MARKER = "\\ No newline at end of file"

# Styles understood by rich; populated on display records only when color is enabled
STYLE_DELETED = "red"
STYLE_INSERTED = "green"
STYLE_HUNK_HEADER = "cyan"
STYLE_FILE_HEADER = "bold"
STYLE_DIFFERENCE_HEADER = "bold yellow"
STYLE_SUMMARY = "bold"
STYLE_SEGMENT_DELETE = "bold red reverse"
STYLE_SEGMENT_INSERT = "bold green reverse"
