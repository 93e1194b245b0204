#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/diff/text_diff.py
"""Line-based comparison of two text inputs.

This module loads inputs into normalized line sequences, aligns them and
bundles the outcome in a :class:`DiffResult` that the renderers consume.
The pipeline is strictly sequential: both inputs are read completely,
then normalized, then aligned, and only then rendered.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from linediff.diff.aligner import align_sequences
from linediff.diff.models import EditScript, LineSequence
from linediff.diff.normalize import build_sequence
from linediff.exceptions import InputReadError
from linediff.options import DiffOptions

if TYPE_CHECKING:
    from linediff.diff.renderers.records import DisplayRecord

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping each line's terminator verbatim.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line; there is no length limit.
    """
    return io.StringIO(text, newline="").readlines()


def lines_from_text(text: str, options: DiffOptions | None = None, label: str = "<text>") -> LineSequence:
    """Build a line sequence from in-memory text.

    Parameters
    ----------
    text : str
        Full input content
    options : DiffOptions, optional
        Normalization settings
    label : str, default "<text>"
        Name shown in headers

    Returns
    -------
    LineSequence
        Normalized sequence of the text's lines

    """
    return build_sequence(split_lines(text), options or DiffOptions(), label)


def load_lines(
    path: Union[str, Path],
    options: DiffOptions | None = None,
    label: str | None = None,
) -> LineSequence:
    """Read a file into a normalized line sequence.

    Parameters
    ----------
    path : str or Path
        File to read
    options : DiffOptions, optional
        Supplies the encoding and the normalization settings
    label : str, optional
        Name shown in headers (defaults to the path)

    Returns
    -------
    LineSequence
        Normalized sequence of the file's lines

    Raises
    ------
    InputReadError
        If the file is missing, unreadable or cannot be decoded

    """
    options = options or DiffOptions()
    path = Path(path)
    try:
        with open(path, encoding=options.encoding, newline="") as handle:
            raw_lines = handle.readlines()
    except UnicodeDecodeError as e:
        raise InputReadError(
            str(path),
            message=f"Cannot decode {path} as {options.encoding}: {e}",
            original_error=e,
        ) from e
    except OSError as e:
        raise InputReadError(str(path), original_error=e) from e

    logger.debug("Read %d lines from %s", len(raw_lines), path)
    return build_sequence(raw_lines, options, label if label is not None else str(path))


class DiffResult:
    """Outcome of comparing two line sequences.

    Holds both sequences, the edit script and the options used, so that
    every renderer works from the same alignment.
    """

    def __init__(self, left: LineSequence, right: LineSequence, script: EditScript, options: DiffOptions) -> None:
        """Store the aligned sequences and their edit script.

        Parameters
        ----------
        left : LineSequence
            Original input
        right : LineSequence
            Modified input
        script : EditScript
            Alignment of ``left`` against ``right``
        options : DiffOptions
            Options the comparison ran with

        """
        self.left = left
        self.right = right
        self.script = script
        self.options = options

    @property
    def differences(self) -> int:
        return self.script.differences

    @property
    def identical(self) -> bool:
        return self.script.identical

    def records(self) -> list[DisplayRecord]:
        """Render the result in the mode selected by the options."""
        from linediff.diff.renderers import render_records

        return render_records(self.script, self.left, self.right, self.options)


def compare_sequences(left: LineSequence, right: LineSequence, options: DiffOptions | None = None) -> DiffResult:
    """Align two already loaded sequences."""
    options = options or DiffOptions()
    return DiffResult(left, right, align_sequences(left, right, options), options)


def compare_texts(
    old_text: str,
    new_text: str,
    options: DiffOptions | None = None,
    old_label: str = "old",
    new_label: str = "new",
) -> DiffResult:
    """Compare two in-memory texts line by line.

    Parameters
    ----------
    old_text, new_text : str
        Texts to compare
    options : DiffOptions, optional
        Comparison settings
    old_label, new_label : str
        Names used in headers

    Returns
    -------
    DiffResult
        Aligned sequences and edit script

    """
    options = options or DiffOptions()
    return compare_sequences(
        lines_from_text(old_text, options, old_label),
        lines_from_text(new_text, options, new_label),
        options,
    )


def compare_files(
    old_path: Union[str, Path],
    new_path: Union[str, Path],
    options: DiffOptions | None = None,
    old_label: str | None = None,
    new_label: str | None = None,
) -> DiffResult:
    """Compare two text files line by line.

    Both files are read in full before the alignment starts.

    Parameters
    ----------
    old_path : str or Path
        Path to the original file
    new_path : str or Path
        Path to the modified file
    options : DiffOptions, optional
        Comparison settings
    old_label, new_label : str, optional
        Names used in headers (default to the paths)

    Returns
    -------
    DiffResult
        Aligned sequences and edit script

    Raises
    ------
    InputReadError
        If either file cannot be read
    ResourceExceededError
        If the inputs are too large for the configured strategy

    """
    options = options or DiffOptions()
    left = load_lines(old_path, options, old_label)
    right = load_lines(new_path, options, new_label)
    return compare_sequences(left, right, options)
