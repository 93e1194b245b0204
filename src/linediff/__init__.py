"""linediff - line-alignment comparison of two text inputs.

linediff reports where two texts differ. Lines are aligned with a
longest-common-subsequence edit script, so a single inserted or deleted
line is reported once instead of shifting every following line out of
place. Changed regions can be shown one at a time, with character-level
highlighting inside changed line pairs, or as unified diff hunks.

Key Features
------------
- Minimal edit scripts with a deterministic delete-before-insert tie-break
- Ignore-whitespace and ignore-case comparison
- Per-difference, unified and JSON output
- Explicit resource limit, with a linear-space strategy for large inputs

Requirements
------------
- Python 3.10+
- rich (terminal colors)

Examples
--------
Compare two files:

    >>> from linediff import DiffOptions, compare_files
    >>> result = compare_files("a.txt", "b.txt", DiffOptions(ignore_case=True))
    >>> result.differences
    1
    >>> for record in result.records():
    ...     print(record.text)

See Also
--------
linediff.diff : alignment engine and renderers
linediff.cli : command-line entry point
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "linediff requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from linediff.diff import (  # noqa: E402
    DiffResult,
    EditOp,
    EditScript,
    compare_files,
    compare_sequences,
    compare_texts,
    load_lines,
)
from linediff.exceptions import (  # noqa: E402
    ConfigError,
    FileError,
    InputReadError,
    LineDiffError,
    ResourceExceededError,
)
from linediff.options import DiffOptions  # noqa: E402

__all__ = [
    "__version__",
    "compare_files",
    "compare_sequences",
    "compare_texts",
    "load_lines",
    "DiffOptions",
    "DiffResult",
    "EditOp",
    "EditScript",
    # Exceptions
    "LineDiffError",
    "ConfigError",
    "FileError",
    "InputReadError",
    "ResourceExceededError",
]
