"""Pytest configuration and shared fixtures for the docx2md test suite.

This module provides shared fixtures and test configuration used across
the unit and integration tests.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


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
def chdir_temp(temp_dir: Path) -> Generator[Path, None, None]:
    """Run the test with the temporary directory as working directory.

    Image export writes relative to the working directory by default, so
    tests that export images use this fixture to keep the checkout clean.

    """
    previous = Path.cwd()
    os.chdir(temp_dir)
    try:
        yield temp_dir
    finally:
        os.chdir(previous)


@pytest.fixture(autouse=True)
def clean_docx2md_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove DOCX2MD_* environment variables so CLI defaults are predictable."""
    for key in list(os.environ):
        if key.startswith("DOCX2MD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Undo the root handler changes made by ``main()`` and ``configure_logging``."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        # pytest installs subclasses of these; only plain handlers come from configure_logging
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
