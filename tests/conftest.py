"""Pytest configuration and shared fixtures for the linediff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir, write_text_file

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def numbered_lines() -> str:
    """Provide ten numbered lines, each terminated by a newline.

    Returns
    -------
    str
        Lines ``"1\\n"`` through ``"10\\n"`` joined together.

    """
    return "".join(f"{number}\n" for number in range(1, 11))


@pytest.fixture
def file_pair(temp_dir: Path) -> tuple[Path, Path]:
    """Provide two small text files that differ in one line.

    Returns
    -------
    tuple of Path
        ``(original, modified)`` paths.

    """
    original = write_text_file(temp_dir / "original.txt", "alpha\nbeta\ngamma\n")
    modified = write_text_file(temp_dir / "modified.txt", "alpha\nBETA\ngamma\n")
    return original, modified
