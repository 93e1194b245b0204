#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the linediff library.

This module defines the exception classes raised by the comparison
pipeline. Every failure is fatal for the run: nothing is retried and no
partial output is produced.

Exception Hierarchy
-------------------
- LineDiffError (base exception)

  - ConfigError (malformed or mutually exclusive options)

  - FileError (file access and I/O)
    - InputReadError (input missing, unreadable or undecodable)

  - ResourceExceededError (input too large for the chosen alignment strategy)

"""

from __future__ import annotations

from typing import Any


class LineDiffError(Exception):
    """Base exception class for all linediff-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigError(LineDiffError):
    """Exception raised for malformed or mutually exclusive options.

    Raised before any input is read.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    parameter_name : str, optional
        Name of the offending option
    parameter_value : any, optional
        The value that was rejected
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(LineDiffError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputReadError(FileError):
    """Exception raised when an input cannot be read into lines.

    Covers missing files, permission problems, directories given as
    inputs and content that cannot be decoded with the configured encoding.

    Parameters
    ----------
    file_path : str
        Path of the input that could not be read
    message : str, optional
        Custom error message. If not provided, one is built from the cause
    original_error : Exception, optional
        The underlying OS or decoding error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the input read error."""
        if message is None:
            if original_error is not None:
                message = f"Cannot read {file_path}: {original_error}"
            else:
                message = f"Cannot read {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ResourceExceededError(LineDiffError):
    """Exception raised when an alignment would exceed its resource budget.

    Parameters
    ----------
    required : int
        Number of table cells the alignment needs
    limit : int
        Configured maximum number of cells
    strategy : str, default "table"
        Alignment strategy that hit the limit
    message : str, optional
        Custom error message. If not provided, a message suggesting the
        linear-space strategy is generated

    """

    def __init__(self, required: int, limit: int, strategy: str = "table", message: str | None = None):
        """Initialize the resource error with the requested and permitted sizes."""
        if message is None:
            message = (
                f"Alignment needs {required:,} table cells, above the limit of {limit:,}. "
                "Use the linear-space strategy (--linear-space) or raise the limit (--max-cells)."
            )
        super().__init__(message)
        self.required = required
        self.limit = limit
        self.strategy = strategy
