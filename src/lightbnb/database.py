"""
Module-level accessors for the web layer.

Each coroutine delegates to one LightBnbRepository bound to the process-wide
engine. Call ``close()`` when the process stops to release the pool.

Usage:
    >>> from lightbnb import database
    >>> user = await database.get_user_with_email("tristanjacobs@gmail.com")
    >>> listings = await database.get_all_properties({"city": "Vancouver"}, 5)
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from lightbnb.infrastructure.database import dispose_engine, get_engine
from lightbnb.infrastructure.repository import LightBnbRepository
from lightbnb.infrastructure.sql import FilterOptions

_repository: Optional[LightBnbRepository] = None


def get_repository() -> LightBnbRepository:
    """Return the shared repository, creating it (and the engine) on first use."""
    global _repository
    if _repository is None:
        _repository = LightBnbRepository(get_engine())
    return _repository


async def close() -> None:
    """Drop the shared repository and dispose the engine's pool."""
    global _repository
    _repository = None
    await dispose_engine()


# Users


async def get_user_with_email(email: str) -> Optional[Dict[str, Any]]:
    return await get_repository().get_user_with_email(email)


async def get_user_with_id(user_id: int) -> Optional[Dict[str, Any]]:
    return await get_repository().get_user_with_id(user_id)


async def add_user(user: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    return await get_repository().add_user(user)


# Reservations


async def get_all_reservations(
    guest_id: int, limit: Optional[int] = None
) -> Optional[List[Dict[str, Any]]]:
    return await get_repository().get_all_reservations(guest_id, limit)


# Properties


async def get_all_properties(
    options: Union[FilterOptions, Mapping[str, Any], None] = None,
    limit: Optional[int] = None,
) -> Optional[List[Dict[str, Any]]]:
    return await get_repository().get_all_properties(options, limit)


async def add_property(new_property: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    return await get_repository().add_property(new_property)
