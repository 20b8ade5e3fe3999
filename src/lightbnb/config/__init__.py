"""Configuration management for LightBnB.

This module provides centralized configuration loaded from environment variables
with validation using Pydantic BaseSettings.

Usage:
    >>> from lightbnb.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.get_database_connection_string())
"""

from lightbnb.config.settings import (
    DatabaseSettings,
    Settings,
    StoreErrorPolicy,
    get_settings,
    to_async_dsn,
)

__all__ = [
    "DatabaseSettings",
    "Settings",
    "StoreErrorPolicy",
    "get_settings",
    "to_async_dsn",
]
