"""Pytest configuration and shared fixtures for the clauserender test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "documents"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
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
def contract_path() -> Path:
    """Path to the sample services contract saved by the editor."""
    return FIXTURES_DIR / "contract.json"


@pytest.fixture
def contract_data(contract_path: Path) -> Any:
    """Decoded editor JSON of the sample services contract."""
    return json.loads(contract_path.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def isolate_config_discovery(monkeypatch, tmp_path):
    """Keep CLI config discovery from picking up files outside the test."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo root logger changes made by CLI logging setup."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
