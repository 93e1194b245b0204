#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/renderers/json.py
"""JSON diff renderer for structured output.

This renderer serialises a :class:`DiffResult` (operations, unified hunks
and statistics) into machine-readable JSON for programmatic processing.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from linediff.diff.models import EditOp, LineSequence
from linediff.diff.renderers.unified import group_hunks
from linediff.diff.text_diff import DiffResult


class JsonDiffRenderer:
    """Render a diff result as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)

    Examples
    --------
    Render diff as JSON:
        >>> from linediff import compare_files
        >>> from linediff.diff.renderers import JsonDiffRenderer
        >>> result = compare_files("old.txt", "new.txt")
        >>> json_output = JsonDiffRenderer().render(result)

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 2,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent

    def render(self, result: DiffResult) -> str:
        """Render a diff result to a JSON string.

        Parameters
        ----------
        result : DiffResult
            Aligned sequences and edit script

        Returns
        -------
        str
            JSON-formatted diff output

        """
        data = self.to_dict(result)
        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)

    def to_dict(self, result: DiffResult) -> Dict[str, Any]:
        """Build the JSON-serialisable structure for ``result``."""
        script = result.script
        return {
            "type": "line_diff",
            "old_file": result.left.label,
            "new_file": result.right.label,
            "identical": script.identical,
            "differences": script.differences,
            "context_lines": result.options.context_lines,
            "operations": [self._operation(op, result.left, result.right) for op in script],
            "hunks": self._hunks(result),
            "statistics": {
                "lines_added": script.lines_inserted,
                "lines_deleted": script.lines_deleted,
                "lines_context": script.lines_unchanged,
                "total_changes": script.lines_inserted + script.lines_deleted,
            },
        }

    def _operation(self, op: EditOp, left: LineSequence, right: LineSequence) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            "tag": op.tag,
            "old_start": op.left.start,
            "old_count": op.left.count,
            "new_start": op.right.start,
            "new_count": op.right.count,
        }
        if op.is_change:
            entry["old_lines"] = [line.text for line in left.slice(op.left)]
            entry["new_lines"] = [line.text for line in right.slice(op.right)]
        return entry

    def _hunks(self, result: DiffResult) -> list[Dict[str, Any]]:
        hunks: list[Dict[str, Any]] = []
        for hunk in group_hunks(result.script, result.options.context_lines):
            changes: list[Dict[str, str]] = []
            for op in hunk.ops:
                if op.tag == "equal":
                    changes.extend({"type": "context", "content": line.text} for line in result.left.slice(op.left))
                    continue
                changes.extend({"type": "deleted", "content": line.text} for line in result.left.slice(op.left))
                changes.extend({"type": "added", "content": line.text} for line in result.right.slice(op.right))
            hunks.append({"header": hunk.header, "changes": changes})
        return hunks
