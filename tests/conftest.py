"""
Shared test fixtures.
"""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration made by the CLI and config tests."""
    yield
    structlog.reset_defaults()
