"""
Property table operations mixin.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from lightbnb.infrastructure.database.exceptions import InvalidInputError
from lightbnb.infrastructure.sql import (
    CompiledQuery,
    FilterOptions,
    build_insert_query,
    build_property_search_query,
)

PROPERTIES_TABLE = "properties"

# Column name -> Python type the driver expects. asyncpg does not cast, so
# text columns that normalized to numbers (post codes, street numbers) are
# turned back into strings before binding.
PROPERTY_COLUMNS: Dict[str, type] = {
    "owner_id": int,
    "title": str,
    "description": str,
    "thumbnail_photo_url": str,
    "cover_photo_url": str,
    "cost_per_night": int,
    "parking_spaces": int,
    "number_of_bathrooms": int,
    "number_of_bedrooms": int,
    "country": str,
    "street": str,
    "city": str,
    "province": str,
    "post_code": str,
    "active": bool,
}


_TRUE_FLAGS = frozenset({"true", "on", "yes", "1"})
_FALSE_FLAGS = frozenset({"false", "off", "no", "0"})


def _parse_flag(column: str, value: Any) -> bool:
    """Parse a form checkbox or flag; unknown spellings are rejected."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_FLAGS:
        return True
    if text in _FALSE_FLAGS:
        return False
    raise InvalidInputError(f"Invalid boolean for {column}: {value!r}")


def _bind_value(column: str, value: Any) -> Any:
    column_type = PROPERTY_COLUMNS[column]
    if column_type is str and not isinstance(value, str):
        return str(value)
    if column_type is bool:
        return _parse_flag(column, value)
    return value


class PropertyOpsMixin:
    """Mixin providing operations for the properties table."""

    async def get_all_properties(
        self,
        options: Union[FilterOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None,
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Search properties, cheapest first, each with its average rating.

        Args:
            options: city, owner_id, minimum_price_per_night,
                maximum_price_per_night, minimum_rating; all optional.
            limit: Maximum rows; defaults to the configured result limit.
        """
        query = build_property_search_query(options, self._resolve_limit(limit))
        return await self._fetch_rows("get_all_properties", query)

    async def add_property(
        self, new_property: Mapping[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Add a property built from raw form fields.

        Blank fields are left out so column defaults apply; numeric strings
        are bound as numbers. Keys that are not property columns are ignored.

        Returns:
            The inserted property record.

        Raises:
            InvalidInputError: If every field is blank or a flag is unreadable.
        """
        attributes = {k: v for k, v in new_property.items() if k in PROPERTY_COLUMNS}
        ignored = sorted(set(new_property) - set(attributes))
        if ignored:
            self.log.debug("repository.add_property.ignored_fields", fields=ignored)

        compiled = build_insert_query(attributes, PROPERTIES_TABLE)
        # attributes is normalized in place and keeps the compiled column order
        query = CompiledQuery(
            text=compiled.text,
            values=tuple(_bind_value(k, v) for k, v in attributes.items()),
        )
        return await self._fetch_one("add_property", query)
