"""
SQL identifier handling utilities.

Column and table names are interpolated into statement text unquoted, so they
are restricted to plain identifiers. Values always travel as bound parameters.
"""

import re
from typing import Iterable, List, Optional

from lightbnb.infrastructure.database.exceptions import InvalidInputError

_PLAIN_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def ensure_identifier(name: str) -> str:
    """
    Return ``name`` unchanged if it is a plain SQL identifier.

    Raises:
        InvalidInputError: If the name could alter the statement structure

    Examples:
        >>> ensure_identifier("cost_per_night")
        'cost_per_night'
        >>> ensure_identifier("name; DROP TABLE users")
        Traceback (most recent call last):
        ...
        lightbnb.infrastructure.database.exceptions.InvalidInputError: ...
    """
    if not isinstance(name, str) or not _PLAIN_IDENTIFIER_RE.match(name):
        raise InvalidInputError(f"Invalid SQL identifier: {name!r}")
    return name


def ensure_identifiers(names: Iterable[str]) -> List[str]:
    return [ensure_identifier(name) for name in names]


def qualify_table(table: str, schema: Optional[str] = None) -> str:
    """
    Create a table reference with optional schema prefix.

    A dotted ``table`` ("public.users") is accepted and validated part by part.

    Examples:
        >>> qualify_table("users")
        'users'
        >>> qualify_table("users", schema="public")
        'public.users'
        >>> qualify_table("public.users")
        'public.users'
    """
    if not isinstance(table, str):
        raise InvalidInputError(f"Invalid table name: {table!r}")
    parts = table.split(".")
    if schema:
        parts.insert(0, schema)
    if len(parts) > 2:
        raise InvalidInputError(f"Invalid table name: {table!r}")
    return ".".join(ensure_identifiers(parts))
