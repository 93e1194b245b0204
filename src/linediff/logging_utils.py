#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/logging_utils.py
"""Logging setup for the linediff command.

Log output always goes to stderr (and optionally a file) so it never mixes
with a difference report written to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "linediff: %(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(log_level: int | str, trace_mode: bool = False) -> int:
    """Turn a level name or number into a logging level.

    Trace mode always means DEBUG. Unknown names fall back to WARNING.
    """
    if trace_mode:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the command-line tool.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path of a file that receives a copy of every log message.
    trace_mode : bool, default False
        Log at DEBUG level with timestamps and logger names.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = resolve_level(log_level, trace_mode)
    formatter = logging.Formatter(
        TRACE_FORMAT if trace_mode else PLAIN_FORMAT,
        datefmt=TRACE_DATE_FORMAT if trace_mode else None,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.debug("Logging to file: %s", log_file)
    return root_logger
