"""Shared test fixtures."""

import pytest
from pydantic_ai import models

from codereview.log import configure_logging


@pytest.fixture(autouse=True)
def _prevent_real_api_calls() -> None:
    """Safety: block real API calls in all tests."""
    original = models.ALLOW_MODEL_REQUESTS
    models.ALLOW_MODEL_REQUESTS = False
    yield
    models.ALLOW_MODEL_REQUESTS = original


@pytest.fixture(autouse=True)
def _default_logging() -> None:
    """Each test starts from the default logging setup (WARNING, stderr)."""
    configure_logging()
