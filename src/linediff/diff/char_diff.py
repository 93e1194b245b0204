#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/char_diff.py
"""Character-level alignment inside a substituted line pair.

This runs the same LCS alignment as the line aligner, treating each
character as a token. Results drive highlighting only and are discarded
once rendered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from linediff.constants import DEFAULT_MAX_CHAR_CELLS, SegmentKind
from linediff.diff.aligner import compute_opcodes, table_cells
from linediff.diff.models import CharEditOp
from linediff.exceptions import ResourceExceededError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of characters with one of three classifications."""

    kind: SegmentKind
    text: str


def align_characters(
    left: str,
    right: str,
    max_cells: int = DEFAULT_MAX_CHAR_CELLS,
) -> list[CharEditOp]:
    """Align two strings character by character.

    Parameters
    ----------
    left, right : str
        Texts of the substituted line pair
    max_cells : int
        Largest LCS table allowed for this pair

    Returns
    -------
    list of CharEditOp
        Operations with 0-based half-open character offsets

    Raises
    ------
    ResourceExceededError
        If the pair is too long to align within ``max_cells``

    """
    return [CharEditOp(*opcode) for opcode in compute_opcodes(left, right, strategy="table", max_cells=max_cells)]


def char_segments(left: str, right: str, max_cells: int = DEFAULT_MAX_CHAR_CELLS) -> list[Segment]:
    """Classify the characters of a line pair as unchanged, deleted or inserted.

    Within a substituted run the deleted characters are emitted before the
    inserted ones. When the pair exceeds ``max_cells`` a warning is logged
    and the whole pair is reported as one deletion followed by one insertion.

    Parameters
    ----------
    left, right : str
        Texts of the substituted line pair (without line terminators)
    max_cells : int
        Largest LCS table allowed for this pair

    Returns
    -------
    list of Segment
        Segments in display order; concatenating the ``equal`` and ``delete``
        segments yields ``left``, the ``equal`` and ``insert`` ones ``right``

    """
    try:
        ops = align_characters(left, right, max_cells=max_cells)
    except ResourceExceededError:
        logger.warning(
            "Line pair of %d and %d characters needs %d cells for character highlighting (limit %d); "
            "showing it as a whole-line change",
            len(left),
            len(right),
            table_cells(len(left), len(right)),
            max_cells,
        )
        return [segment for segment in (Segment("delete", left), Segment("insert", right)) if segment.text]

    segments: list[Segment] = []
    for op in ops:
        if op.tag == "equal":
            segments.append(Segment("equal", left[op.left_start : op.left_end]))
            continue
        if op.left_end > op.left_start:
            segments.append(Segment("delete", left[op.left_start : op.left_end]))
        if op.right_end > op.right_start:
            segments.append(Segment("insert", right[op.right_start : op.right_end]))
    return segments
