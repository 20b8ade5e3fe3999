"""
SQL INSERT statement builders.

Turns a flat attribute map (typically raw form fields) into a single-row
INSERT with positional parameters. Form input arrives as strings, so the map
is normalized first: numeric strings become numbers and blank fields are
dropped so the column default applies.
"""

import math
import re
from decimal import Decimal
from typing import Any, List, MutableMapping, Optional, Protocol, Union

from lightbnb.infrastructure.database.exceptions import InvalidInputError

from ..core.query import CompiledQuery
from ..dialects.postgresql import PostgreSQLDialect

Number = Union[int, float, Decimal]

_DECIMAL_LITERAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_RADIX_LITERAL_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_RE = re.compile(r"^[+-]?Infinity$")


class Dialect(Protocol):
    """Protocol for SQL dialects."""

    name: str

    def placeholders(self, count: int) -> List[str]: ...
    def build_insert(
        self,
        table: str,
        columns: List[str],
        placeholders: List[str],
        schema: Optional[str] = None,
        returning: bool = True,
    ) -> str: ...


def _integral(value: float) -> Number:
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def parse_number(value: Any) -> Optional[Number]:
    """
    Parse a scalar the way a browser form value is coerced to a number.

    Strings are trimmed; blank strings and None count as 0. Decimal and
    exponent literals, 0x/0o/0b literals and Infinity are accepted. Returns
    None when the value is not a number.

    Examples:
        >>> parse_number(" 42 ")
        42
        >>> parse_number("")
        0
        >>> parse_number("5abc") is None
        True
        >>> parse_number("1.5")
        1.5
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, Decimal)):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Attribute values must be scalars, got {type(value).__name__}"
        )

    text = value.strip()
    if text == "":
        return 0
    if _DECIMAL_LITERAL_RE.match(text):
        if "." in text or "e" in text.lower():
            return _integral(float(text))
        return int(text)
    if _RADIX_LITERAL_RE.match(text):
        return int(text, 0)
    if _INFINITY_RE.match(text):
        return -math.inf if text.startswith("-") else math.inf
    return None


def normalize_attributes(attributes: MutableMapping[str, Any]) -> None:
    """
    Normalize an attribute map in place.

    For every key:
    - a non-zero number, or a string that reads exactly "0" once trimmed,
      replaces the value with its numeric form;
    - otherwise a falsy value ("", None, 0) removes the key;
    - anything else ("5abc", "   ", "0.0") is left as it is.

    Example:
        >>> row = {"name": "Bob", "age": "0", "city": "", "beds": "3"}
        >>> normalize_attributes(row)
        >>> row
        {'name': 'Bob', 'age': 0, 'beds': 3}
    """
    for key in list(attributes.keys()):
        value = attributes[key]
        parsed = parse_number(value)
        if parsed or (isinstance(value, str) and value.strip() == "0"):
            attributes[key] = parsed
        elif not value:
            del attributes[key]


class InsertBuilder:
    """
    High-level builder for single-row INSERT statements.

    Example:
        >>> builder = InsertBuilder(PostgreSQLDialect())
        >>> query = builder.from_attributes({"name": "Bob", "age": "0"}, "users")
        >>> query.text
        'INSERT INTO users (name,age) VALUES ($1,$2) RETURNING *;'
        >>> query.values
        ('Bob', 0)
    """

    def __init__(self, dialect: Optional[Dialect] = None):
        self.dialect = dialect or PostgreSQLDialect()

    def insert(
        self,
        table: str,
        columns: List[str],
        schema: Optional[str] = None,
        returning: bool = True,
    ) -> str:
        """
        Build INSERT text for the given columns with one placeholder each.
        """
        placeholders = self.dialect.placeholders(len(columns))
        return self.dialect.build_insert(
            table, columns, placeholders, schema, returning=returning
        )

    def from_attributes(
        self,
        attributes: MutableMapping[str, Any],
        table_name: str,
        return_record: bool = True,
    ) -> CompiledQuery:
        """
        Compile an attribute map into an INSERT.

        The map is normalized in place (see normalize_attributes); callers
        must not rely on it being unchanged afterwards.

        Args:
            attributes: Column name to raw value
            table_name: Target table, optionally schema-qualified
            return_record: Append RETURNING * (default True)

        Raises:
            InvalidInputError: If no column survives normalization, or a
                column/table name is not a plain identifier
        """
        normalize_attributes(attributes)
        if not attributes:
            raise InvalidInputError(
                f"Cannot build INSERT into {table_name!r}: no non-empty attributes"
            )

        columns = list(attributes.keys())
        text = self.insert(table_name, columns, returning=return_record)
        return CompiledQuery(text=text, values=tuple(attributes[c] for c in columns))


def build_insert_query(
    attributes: MutableMapping[str, Any],
    table_name: str,
    return_record: bool = True,
) -> CompiledQuery:
    """Compile ``attributes`` into a PostgreSQL INSERT into ``table_name``."""
    return InsertBuilder().from_attributes(attributes, table_name, return_record)
