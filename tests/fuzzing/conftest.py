"""Fixtures for the property-based tests."""

import pytest

from quote_kernel.logging_config import LogContext, reset_logging


@pytest.fixture(autouse=True, scope="module")
def _clean_logging():
    """Module-scoped so hypothesis examples do not share a function fixture."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()
