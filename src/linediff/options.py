#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/options.py
"""Immutable configuration for a comparison run.

A single :class:`DiffOptions` value is built once per invocation (by the
CLI or by a library caller) and threaded explicitly into the normalizer,
the aligner and the renderers. There is no process-wide option state.
"""

from __future__ import annotations

import codecs
import sys
from dataclasses import dataclass, field, replace
from typing import Any, get_args

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from linediff.constants import (
    DEFAULT_CONTEXT_LINES,
    DEFAULT_ENCODING,
    DEFAULT_MAX_ALIGNMENT_CELLS,
    DEFAULT_MAX_CHAR_CELLS,
    DEFAULT_STRATEGY,
    AlignmentStrategy,
)
from linediff.exceptions import ConfigError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Configuration for normalizing, aligning and rendering two inputs.

    Parameters
    ----------
    ignore_whitespace : bool, default False
        Remove every whitespace character (not only leading/trailing) before comparing.
    ignore_case : bool, default False
        Case-fold lines before comparing.
    color_output : bool, default False
        Populate style information on display records.
    character_diff : bool, default False
        Populate character-level segments for substituted line pairs.
    unified_format : bool, default False
        Render unified hunks instead of one block per difference.
    context_lines : int, default 3
        Lines of unchanged context around each unified hunk.
    strategy : {'table', 'linear'}, default 'table'
        Line alignment strategy. ``table`` keeps the full LCS table and
        reproduces the delete-before-insert tie-break exactly; ``linear``
        uses Hirschberg's linear-space refinement.
    max_alignment_cells : int
        Maximum LCS table size for line alignment with the ``table`` strategy.
    max_char_cells : int
        Maximum LCS table size for a single character-level alignment.
    encoding : str, default 'utf-8'
        Text encoding used when reading inputs.

    Raises
    ------
    ConfigError
        If a numeric field is out of range or the strategy is unknown.

    """

    ignore_whitespace: bool = field(
        default=False,
        metadata={"help": "Ignore all whitespace characters when comparing lines"},
    )
    ignore_case: bool = field(
        default=False,
        metadata={"help": "Ignore case differences when comparing lines"},
    )
    color_output: bool = field(
        default=False,
        metadata={"help": "Attach color styles to rendered records"},
    )
    character_diff: bool = field(
        default=False,
        metadata={"help": "Highlight character-level differences inside changed lines"},
    )
    unified_format: bool = field(
        default=False,
        metadata={"help": "Render unified diff hunks"},
    )
    context_lines: int = field(
        default=DEFAULT_CONTEXT_LINES,
        metadata={"help": "Number of context lines around unified hunks", "type": int},
    )
    strategy: AlignmentStrategy = field(
        default=DEFAULT_STRATEGY,
        metadata={"help": "Line alignment strategy", "choices": list(get_args(AlignmentStrategy))},
    )
    max_alignment_cells: int = field(
        default=DEFAULT_MAX_ALIGNMENT_CELLS,
        metadata={"help": "Maximum LCS table cells for line alignment", "type": int},
    )
    max_char_cells: int = field(
        default=DEFAULT_MAX_CHAR_CELLS,
        metadata={"help": "Maximum LCS table cells for one character-level alignment", "type": int},
    )
    encoding: str = field(
        default=DEFAULT_ENCODING,
        metadata={"help": "Encoding used to decode input files"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and enumerated values.

        Raises
        ------
        ConfigError
            If any field value is outside its valid range.

        """
        if self.context_lines < 0:
            raise ConfigError(
                f"context_lines must be non-negative, got {self.context_lines}",
                parameter_name="context_lines",
                parameter_value=self.context_lines,
            )
        if self.strategy not in get_args(AlignmentStrategy):
            raise ConfigError(
                f"Unknown alignment strategy: {self.strategy!r}",
                parameter_name="strategy",
                parameter_value=self.strategy,
            )
        for name in ("max_alignment_cells", "max_char_cells"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigError(
                    f"{name} must be positive, got {value}",
                    parameter_name=name,
                    parameter_value=value,
                )
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(
                f"Unknown encoding: {self.encoding!r}",
                parameter_name="encoding",
                parameter_value=self.encoding,
                original_error=e,
            ) from e
