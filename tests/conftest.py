"""
Global pytest configuration for tdd-primer

This file provides shared fixtures and enforces Python version requirements.
"""

from __future__ import annotations

import logging
import sys

import pytest
import structlog

from tddprimer.shapes import ShapeFactoryRegistry, default_registry
from tddprimer.text import DelimitedJoiner

_MIN_PY_VERSION = (3, 11)
_CONFIG_ENV_VARS = (
    "TDDPRIMER_CONFIG_FILE",
    "TDDPRIMER_LOG_LEVEL",
    "TDDPRIMER_LOG_FORMAT",
    "TDDPRIMER_DELIMITER",
)


def _verify_python_version() -> str:
    """Return the interpreter version string or exit if <3.11."""
    version_info = sys.version_info
    version_str = ".".join(map(str, version_info[:3]))
    if version_info < _MIN_PY_VERSION:
        pytest.exit(
            f"ERROR: pytest must run on Python 3.11+ (detected {version_str}).",
            returncode=1,
        )
    return version_str


def pytest_report_header(config: pytest.Config) -> str:
    version_str = _verify_python_version()
    return f"Python interpreter verified for pytest: {version_str}"


def pytest_configure(config: pytest.Config) -> None:
    """Register project markers to prevent unknown marker warnings."""
    markers = {
        "unit": "Unit tests that should execute quickly.",
        "integration": "Tests exercising several components together.",
    }
    for name, description in markers.items():
        config.addinivalue_line("markers", f"{name}: {description}")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep host configuration and earlier logging setup out of each test."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()


@pytest.fixture
def comma_joiner() -> DelimitedJoiner:
    return DelimitedJoiner(",")


@pytest.fixture
def registry() -> ShapeFactoryRegistry:
    return default_registry()
