#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/__init__.py
"""Renderers turning an edit script into display records or JSON.

Available Renderers
-------------------
- PerDifferenceRenderer: one block per changed region, with optional character diff
- UnifiedDiffRenderer: ``diff -u`` style hunks with context
- JsonDiffRenderer: structured JSON output for programmatic access

Examples
--------
Render the mode selected by the options:
    >>> from linediff import DiffOptions, compare_files
    >>> from linediff.diff.renderers import render_records
    >>> options = DiffOptions(unified_format=True)
    >>> result = compare_files("old.txt", "new.txt", options)
    >>> for record in render_records(result.script, result.left, result.right, options):
    ...     print(record.text)

"""

from __future__ import annotations

from linediff.diff.models import EditScript, LineSequence
from linediff.diff.renderers.json import JsonDiffRenderer
from linediff.diff.renderers.per_difference import PerDifferenceRenderer
from linediff.diff.renderers.records import DisplayRecord
from linediff.diff.renderers.unified import Hunk, UnifiedDiffRenderer, group_hunks
from linediff.options import DiffOptions


def render_records(
    script: EditScript,
    left: LineSequence,
    right: LineSequence,
    options: DiffOptions,
) -> list[DisplayRecord]:
    """Render ``script`` in the mode chosen by ``options.unified_format``."""
    if options.unified_format:
        return UnifiedDiffRenderer(options).render(script, left, right)
    return PerDifferenceRenderer(options).render(script, left, right)


__all__ = [
    "DisplayRecord",
    "Hunk",
    "JsonDiffRenderer",
    "PerDifferenceRenderer",
    "UnifiedDiffRenderer",
    "group_hunks",
    "render_records",
]
