"""Pytest configuration shared by the LightBnB suites."""

from __future__ import annotations

import os
from typing import Generator

import pytest

# Keep developer .env files and shell variables out of unit tests.
for _name in (
    "LIGHTBNB_DATABASE_URI",
    "LIGHTBNB_DATABASE__URI",
    "LIGHTBNB_STORE_ERROR_POLICY",
    "ENVIRONMENT",
):
    os.environ.pop(_name, None)
os.environ.setdefault("LIGHTBNB_ENV_FILE", "tests/.env.missing")

from lightbnb.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
