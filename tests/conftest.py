"""Pytest configuration and fixtures for rainbow_delimiters tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from rainbow_delimiters import context
from rainbow_delimiters.logger import reset_logger


@pytest.fixture(autouse=True)
def clean_global_state() -> Iterator[None]:
    """Reset the logger and config path left behind by CLI invocations."""
    yield
    reset_logger()
    context.set_config_path(None)
