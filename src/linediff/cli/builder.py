#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/cli/builder.py
"""Argument parser, option assembly and exit codes for the linediff CLI."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from linediff import __version__
from linediff.constants import DEFAULT_CONTEXT_LINES, DEFAULT_ENCODING, DEFAULT_MAX_ALIGNMENT_CELLS
from linediff.exceptions import ConfigError, FileError, ResourceExceededError
from linediff.options import DiffOptions

EXIT_SUCCESS = 0
EXIT_DIFFERENCES = 1
EXIT_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RESOURCE_ERROR = 5


def _validate_context_lines(value: str) -> int:
    """Validate context lines is a non-negative integer.

    Parameters
    ----------
    value : str
        Context lines value as string

    Returns
    -------
    int
        Validated context lines value

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"context lines must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"context lines must be non-negative, got {ivalue}")

    return ivalue


def _positive_int(value: str) -> int:
    try:
        ivalue = int(value.replace("_", ""))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'") from e
    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {ivalue}")
    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create the argparse parser for the linediff command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="linediff",
        description="Compare two text files line by line, aligning them on their longest common subsequence",
    )

    parser.add_argument("file1", help="Original file ('-' for stdin)")
    parser.add_argument("file2", help="Modified file ('-' for stdin)")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s version: {__version__}")

    comparison = parser.add_argument_group("Comparison options")
    comparison.add_argument(
        "-w",
        "--wsignore",
        "--ignore-whitespace",
        dest="ignore_whitespace",
        action="store_true",
        help="Ignore all whitespace, including whitespace inside lines",
    )
    comparison.add_argument(
        "-i",
        "--ignorecase",
        "--ignore-case",
        dest="ignore_case",
        action="store_true",
        help="Ignore case differences",
    )
    comparison.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Encoding of the input files (default: {DEFAULT_ENCODING})",
    )

    output = parser.add_argument_group("Output options")
    formats = output.add_mutually_exclusive_group()
    formats.add_argument("-u", "--unified", dest="unified", action="store_true", help="Unified difference format")
    formats.add_argument("--json", dest="json", action="store_true", help="Structured JSON output")
    output.add_argument(
        "-U",
        "--context",
        type=_validate_context_lines,
        default=DEFAULT_CONTEXT_LINES,
        help=f"Number of context lines in unified output (default: {DEFAULT_CONTEXT_LINES})",
    )
    output.add_argument(
        "-cc",
        "--charbychar",
        dest="char_diff",
        action="store_true",
        help="Character-by-character difference inside changed lines",
    )
    output.add_argument("-c", "--colored", dest="colored", action="store_true", help="Colored difference")
    output.add_argument(
        "--color",
        dest="color",
        choices=["auto", "always", "never"],
        default=None,
        help="Colorize output: auto (if terminal), always, never (default: never)",
    )
    output.add_argument("-o", "--output", help="Write the difference report to a file instead of stdout")

    alignment = parser.add_argument_group("Alignment options")
    alignment.add_argument(
        "--linear-space",
        dest="linear_space",
        action="store_true",
        help="Use linear-space alignment for large inputs (tie-breaks may differ from the default)",
    )
    alignment.add_argument(
        "--max-cells",
        dest="max_cells",
        type=_positive_int,
        default=DEFAULT_MAX_ALIGNMENT_CELLS,
        help=f"Largest alignment table allowed (default: {DEFAULT_MAX_ALIGNMENT_CELLS:,})",
    )

    logging_group = parser.add_argument_group("Logging options")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Debug logging with timestamps and logger names",
    )

    return parser


def resolve_color(parsed_args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Decide whether output should be colored.

    Raises
    ------
    ConfigError
        If ``--colored`` is combined with ``--color never``

    """
    if parsed_args.colored and parsed_args.color == "never":
        raise ConfigError(
            "--colored and --color never are mutually exclusive",
            parameter_name="color",
            parameter_value=parsed_args.color,
        )
    if parsed_args.colored or parsed_args.color == "always":
        return True
    if parsed_args.color == "auto" and not parsed_args.output:
        target = stream or sys.stdout
        isatty = getattr(target, "isatty", None)
        return bool(callable(isatty) and isatty())
    return False


def build_options(parsed_args: argparse.Namespace, stream: TextIO | None = None) -> DiffOptions:
    """Assemble the immutable run configuration from parsed arguments.

    Raises
    ------
    ConfigError
        If options are malformed or mutually exclusive

    """
    if parsed_args.file1 == "-" and parsed_args.file2 == "-":
        raise ConfigError("Cannot read both inputs from stdin", parameter_name="file2", parameter_value="-")

    return DiffOptions(
        ignore_whitespace=parsed_args.ignore_whitespace,
        ignore_case=parsed_args.ignore_case,
        color_output=resolve_color(parsed_args, stream),
        character_diff=parsed_args.char_diff,
        unified_format=parsed_args.unified,
        context_lines=parsed_args.context,
        strategy="linear" if parsed_args.linear_space else "table",
        max_alignment_cells=parsed_args.max_cells,
        encoding=parsed_args.encoding,
    )


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ConfigError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ResourceExceededError):
        return EXIT_RESOURCE_ERROR

    # All other errors (unexpected errors)
    return EXIT_ERROR
