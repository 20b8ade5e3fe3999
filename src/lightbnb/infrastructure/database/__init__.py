"""
Database connection lifecycle and error types.
"""

from .engine import create_engine_from_settings, dispose_engine, get_engine
from .exceptions import InvalidInputError, LightBnbError, StoreError

__all__ = [
    "InvalidInputError",
    "LightBnbError",
    "StoreError",
    "create_engine_from_settings",
    "dispose_engine",
    "get_engine",
]
