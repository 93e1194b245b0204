#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/cli/__init__.py
"""Command-line interface for linediff.

Usage::

    linediff FILE1 FILE2 [options]

The exit status is 0 when the inputs are identical, 1 when differences were
found and 2 or higher on errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from linediff.cli.builder import (
    EXIT_DIFFERENCES,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_options,
    create_parser,
    get_exit_code_for_exception,
)
from linediff.cli.output import format_plain, write_records
from linediff.diff.models import LineSequence
from linediff.diff.renderers import DisplayRecord, JsonDiffRenderer
from linediff.diff.text_diff import DiffResult, compare_sequences, lines_from_text, load_lines
from linediff.exceptions import InputReadError, LineDiffError
from linediff.logging_utils import configure_logging
from linediff.options import DiffOptions

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_stdin(options: DiffOptions) -> LineSequence:
    data = sys.stdin.buffer.read()
    try:
        text = data.decode(options.encoding)
    except UnicodeDecodeError as e:
        raise InputReadError("stdin", message=f"Cannot decode stdin as {options.encoding}: {e}", original_error=e) from e
    return lines_from_text(text, options, label="stdin")


def _load(source: str, options: DiffOptions) -> LineSequence:
    if source == "-":
        return _read_stdin(options)
    return load_lines(source, options)


def run_comparison(parsed_args: argparse.Namespace, options: DiffOptions) -> DiffResult:
    """Load both inputs completely, then align them."""
    logger.info("Comparing %s and %s", parsed_args.file1, parsed_args.file2)
    left = _load(parsed_args.file1, options)
    right = _load(parsed_args.file2, options)
    return compare_sequences(left, right, options)


def _write_report_file(
    output_path: Path,
    records: list[DisplayRecord] | None,
    report: str | None,
    summary_stream: TextIO | None,
) -> None:
    """Write the uncolored report to a file; unified summaries still go to ``summary_stream``."""
    if records is not None:
        if summary_stream is not None:
            write_records([record for record in records if record.kind == "summary"], summary_stream)
            records = [record for record in records if record.kind != "summary"]
        report = format_plain(records)
    output_path.write_text(report or "", encoding="utf-8")
    logger.info("Difference report written to %s", output_path)


def main(args: list[str] | None = None) -> int:
    """Execute the linediff command.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Exit code: 0 when identical, 1 when differences were found, 2+ on errors

    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits with 2 on malformed or conflicting options
        if e.code == 2:
            return EXIT_VALIDATION_ERROR
        return e.code if isinstance(e.code, int) else 0

    _setup_logging_level(parsed)

    try:
        options = build_options(parsed)
        result = run_comparison(parsed, options)
        # Render fully before writing so a failure never leaves partial output
        if parsed.json:
            report = JsonDiffRenderer().render(result) + "\n"
            records = None
        else:
            records = result.records()
            report = None
    except LineDiffError as e:
        logger.debug("Comparison failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error comparing files: {e}", file=sys.stderr)
        return EXIT_ERROR

    summary_stream = sys.stderr if options.unified_format else None
    try:
        if parsed.output:
            _write_report_file(Path(parsed.output), records, report, summary_stream)
        elif records is not None:
            write_records(records, sys.stdout, use_color=options.color_output, summary_stream=summary_stream)
        else:
            sys.stdout.write(report or "")
    except OSError as e:
        print(f"Error: Cannot write {parsed.output or 'stdout'}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS if result.identical else EXIT_DIFFERENCES


__all__ = ["main", "run_comparison"]
