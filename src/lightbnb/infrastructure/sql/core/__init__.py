"""Core SQL utilities package."""

from .identifier import ensure_identifier, ensure_identifiers, qualify_table
from .parameters import ParameterSink, build_positional_placeholders, placeholder
from .query import CompiledQuery

__all__ = [
    "CompiledQuery",
    "ParameterSink",
    "build_positional_placeholders",
    "ensure_identifier",
    "ensure_identifiers",
    "placeholder",
    "qualify_table",
]
