"""
SQL module for LightBnB statement generation.

Pure, synchronous builders that return CompiledQuery objects (statement text
with PostgreSQL $n placeholders plus the ordered bound values).
"""

from .core.identifier import ensure_identifier, qualify_table
from .core.parameters import ParameterSink, build_positional_placeholders
from .core.query import CompiledQuery
from .dialects.postgresql import PostgreSQLDialect
from .operations.insert import (
    InsertBuilder,
    build_insert_query,
    normalize_attributes,
    parse_number,
)
from .operations.select import (
    FilterOptions,
    PropertySearchBuilder,
    build_property_search_query,
    to_minor_units,
)

__all__ = [
    "CompiledQuery",
    "FilterOptions",
    "InsertBuilder",
    "ParameterSink",
    "PostgreSQLDialect",
    "PropertySearchBuilder",
    "build_insert_query",
    "build_positional_placeholders",
    "build_property_search_query",
    "ensure_identifier",
    "normalize_attributes",
    "parse_number",
    "qualify_table",
    "to_minor_units",
]
