"""
Compiled statement container.

A CompiledQuery is built fresh for every call, handed to exactly one execute,
and then discarded.
"""

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class CompiledQuery:
    """
    SQL text with $n placeholders and its bound values.

    Attributes:
        text: Statement template, e.g. "SELECT * FROM users WHERE id = $1;"
        values: Bound parameters in placeholder order.
    """

    text: str
    values: Tuple[Any, ...] = ()

    @property
    def placeholder_count(self) -> int:
        return len(self.values)
