#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/aligner.py
"""Longest-common-subsequence alignment of two token sequences.

The aligner computes a minimal edit script between two sequences of
comparison keys. The default ``table`` strategy fills the full
``(m+1) x (n+1)`` LCS length table and backtracks from the bottom-right
corner; on a tie between moving up and moving left it moves up, so a
deletion is always preferred over an insertion. This tie-break is part of
the output contract and is reproduced exactly.

The ``linear`` strategy uses Hirschberg's divide and conquer refinement. It
needs only O(m + n) memory and finds a script of the same (minimal) size, but
may choose a different alignment among equally short ones.

Both strategies emit a step list (equal / delete / insert per token) that
is coalesced into opcodes: runs of equal tokens become one ``equal`` op and
every run of non-equal steps between two equal runs becomes a single
``delete``, ``insert`` or (when it touches both sides) ``substitute`` op.

Examples
--------
>>> align_keys(["a", "b", "c"], ["a", "x", "c"]).ops
(Equal(1,1), Substitute(2,2), Equal(3,3))

"""

from __future__ import annotations

import logging
from array import array
from itertools import groupby
from typing import Hashable, Sequence, TypeVar

from linediff.constants import DEFAULT_MAX_ALIGNMENT_CELLS, AlignmentStrategy, OpTag
from linediff.diff.models import EditOp, EditScript, LineRange, LineSequence
from linediff.exceptions import ResourceExceededError
from linediff.options import DiffOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")

Opcode = tuple[OpTag, int, int, int, int]
"""``(tag, i1, i2, j1, j2)`` with 0-based half-open ranges, as in difflib."""

_EQUAL = 0
_DELETE = 1
_INSERT = 2


def _intern(left: Sequence[Hashable], right: Sequence[Hashable]) -> tuple[list[int], list[int]]:
    """Map tokens to small integers so the inner loop compares ints."""
    ids: dict[Hashable, int] = {}
    a = [ids.setdefault(token, len(ids)) for token in left]
    b = [ids.setdefault(token, len(ids)) for token in right]
    return a, b


def _common_suffix(a: list[int], b: list[int]) -> int:
    """Length of the common suffix of ``a`` and ``b``.

    The backtrack starts at the end of both sequences and always takes the
    diagonal on equal tokens, so a common suffix is matched identically with
    or without the table.
    """
    limit = min(len(a), len(b))
    size = 0
    while size < limit and a[-1 - size] == b[-1 - size]:
        size += 1
    return size


def _lcs_table(a: list[int], b: list[int]) -> list[array]:
    """Fill the LCS length table row by row."""
    width = len(b) + 1
    table = [array("I", [0]) * width]
    for x in a:
        prev = table[-1]
        row = array("I", [0]) * width
        current = 0
        for j, y in enumerate(b, start=1):
            if x == y:
                current = prev[j - 1] + 1
            else:
                up = prev[j]
                if up > current:
                    current = up
            row[j] = current
        table.append(row)
    return table


def _backtrack(table: list[array], a: list[int], b: list[int]) -> list[int]:
    """Walk the table from ``(m, n)`` to the origin, preferring deletions on ties."""
    steps: list[int] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            steps.append(_EQUAL)
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            steps.append(_DELETE)
            i -= 1
        else:
            steps.append(_INSERT)
            j -= 1
    steps.extend([_DELETE] * i)
    steps.extend([_INSERT] * j)
    steps.reverse()
    return steps


def _lcs_last_row(a: list[int], b: list[int]) -> list[int]:
    """LCS lengths of ``a`` against every prefix of ``b``, in linear space."""
    prev = [0] * (len(b) + 1)
    for x in a:
        row = [0] * (len(b) + 1)
        current = 0
        for j, y in enumerate(b, start=1):
            if x == y:
                current = prev[j - 1] + 1
            elif prev[j] > current:
                current = prev[j]
            row[j] = current
        prev = row
    return prev


def _hirschberg(a: list[int], b: list[int], steps: list[int]) -> None:
    m, n = len(a), len(b)
    if m == 0:
        steps.extend([_INSERT] * n)
        return
    if n == 0:
        steps.extend([_DELETE] * m)
        return
    if m == 1:
        try:
            k = b.index(a[0])
        except ValueError:
            steps.append(_DELETE)
            steps.extend([_INSERT] * n)
            return
        steps.extend([_INSERT] * k)
        steps.append(_EQUAL)
        steps.extend([_INSERT] * (n - k - 1))
        return

    mid = m // 2
    upper = _lcs_last_row(a[:mid], b)
    lower = _lcs_last_row(a[mid:][::-1], b[::-1])
    split = max(range(n + 1), key=lambda j: upper[j] + lower[n - j])
    _hirschberg(a[:mid], b[:split], steps)
    _hirschberg(a[mid:], b[split:], steps)


def _coalesce(steps: list[int], offset: int = 0) -> list[Opcode]:
    """Group per-token steps into opcodes."""
    opcodes: list[Opcode] = []
    i = j = offset
    for is_equal, group in groupby(steps, key=lambda step: step == _EQUAL):
        run = list(group)
        if is_equal:
            size = len(run)
            opcodes.append(("equal", i, i + size, j, j + size))
            i += size
            j += size
            continue
        deleted = run.count(_DELETE)
        inserted = len(run) - deleted
        tag: OpTag
        if deleted and inserted:
            tag = "substitute"
        elif deleted:
            tag = "delete"
        else:
            tag = "insert"
        opcodes.append((tag, i, i + deleted, j, j + inserted))
        i += deleted
        j += inserted
    return opcodes


def table_cells(left_size: int, right_size: int) -> int:
    """Number of cells in the LCS table for the given sequence sizes."""
    return (left_size + 1) * (right_size + 1)


def compute_opcodes(
    left: Sequence[Hashable],
    right: Sequence[Hashable],
    *,
    strategy: AlignmentStrategy = "table",
    max_cells: int = DEFAULT_MAX_ALIGNMENT_CELLS,
) -> list[Opcode]:
    """Align two token sequences and return coalesced opcodes.

    Parameters
    ----------
    left, right : sequence of hashable
        Tokens to align (line keys or characters)
    strategy : {'table', 'linear'}, default 'table'
        Alignment strategy
    max_cells : int
        Largest table the ``table`` strategy may allocate

    Returns
    -------
    list of tuple
        ``(tag, i1, i2, j1, j2)`` opcodes with 0-based half-open ranges

    Raises
    ------
    ResourceExceededError
        If the ``table`` strategy would need more than ``max_cells`` cells

    """
    a, b = _intern(left, right)
    suffix = _common_suffix(a, b)
    if suffix:
        a = a[: len(a) - suffix]
        b = b[: len(b) - suffix]

    if strategy == "table":
        cells = table_cells(len(a), len(b))
        if cells > max_cells:
            raise ResourceExceededError(required=cells, limit=max_cells, strategy=strategy)
        logger.debug("Aligning %d x %d tokens with a %d cell table", len(a), len(b), cells)
        steps = _backtrack(_lcs_table(a, b), a, b)
    else:
        logger.debug("Aligning %d x %d tokens in linear space", len(a), len(b))
        steps = []
        _hirschberg(a, b, steps)

    steps.extend([_EQUAL] * suffix)
    return _coalesce(steps)


def _to_edit_op(opcode: Opcode) -> EditOp:
    tag, i1, i2, j1, j2 = opcode
    return EditOp(tag, LineRange(i1 + 1, i2 - i1), LineRange(j1 + 1, j2 - j1))


def align_keys(
    left_keys: Sequence[Hashable],
    right_keys: Sequence[Hashable],
    options: DiffOptions | None = None,
) -> EditScript:
    """Compute the edit script between two key sequences.

    Parameters
    ----------
    left_keys, right_keys : sequence of hashable
        Comparison keys in source order
    options : DiffOptions, optional
        Supplies ``strategy`` and ``max_alignment_cells``; defaults are used when omitted

    Returns
    -------
    EditScript
        Script whose ranges partition both sequences

    """
    options = options or DiffOptions()
    opcodes = compute_opcodes(
        left_keys,
        right_keys,
        strategy=options.strategy,
        max_cells=options.max_alignment_cells,
    )
    return EditScript(tuple(_to_edit_op(op) for op in opcodes), len(left_keys), len(right_keys))


def align_sequences(left: LineSequence, right: LineSequence, options: DiffOptions) -> EditScript:
    """Compute the edit script between two loaded line sequences.

    Lines are matched on their normalized keys, not their raw text.
    """
    logger.debug("Aligning %s (%d lines) against %s (%d lines)", left.label, len(left), right.label, len(right))
    script = align_keys(left.keys(), right.keys(), options)
    logger.debug("Edit script has %d operations, %d differences", len(script), script.differences)
    return script


def validate_edit_script(script: EditScript) -> None:
    """Check that the script's ranges partition both sequences in order.

    Raises
    ------
    ValueError
        If a range is out of place, an operation's shape does not match its
        tag, or the ranges do not cover both sequences exactly

    """
    left_pos = right_pos = 1
    for op in script.ops:
        if op.left.start != left_pos or op.right.start != right_pos:
            raise ValueError(f"{op!r} does not start at left {left_pos}, right {right_pos}")
        if op.left.count < 0 or op.right.count < 0:
            raise ValueError(f"{op!r} has a negative range")
        if op.tag == "equal" and op.left.count != op.right.count:
            raise ValueError(f"{op!r} covers ranges of different sizes")
        if op.tag == "delete" and (op.left.count == 0 or op.right.count != 0):
            raise ValueError(f"{op!r} must cover only left lines")
        if op.tag == "insert" and (op.right.count == 0 or op.left.count != 0):
            raise ValueError(f"{op!r} must cover only right lines")
        if op.tag == "substitute" and (op.left.count == 0 or op.right.count == 0):
            raise ValueError(f"{op!r} must cover lines on both sides")
        left_pos = op.left.stop
        right_pos = op.right.stop
    if left_pos != script.left_length + 1 or right_pos != script.right_length + 1:
        raise ValueError(
            f"Script covers {left_pos - 1}/{script.left_length} left and "
            f"{right_pos - 1}/{script.right_length} right lines"
        )


def apply_edit_script(script: EditScript, left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Rebuild the right-hand items by applying ``script`` to ``left``.

    Equal ranges are copied from ``left``; inserted and substituted ranges
    are taken from ``right``; deleted ranges are dropped.
    """
    result: list[T] = []
    for op in script.ops:
        if op.tag == "equal":
            result.extend(left[op.left.start - 1 : op.left.stop - 1])
        elif op.tag in ("insert", "substitute"):
            result.extend(right[op.right.start - 1 : op.right.stop - 1])
    return result
