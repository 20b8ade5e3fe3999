"""
SQL parameter binding utilities.

PostgreSQL numbers positional parameters $1..$n; these helpers keep the
numbering and the bound values in step while a statement is assembled.
"""

from typing import Any, List, Tuple


def placeholder(index: int) -> str:
    """
    Render a positional placeholder.

    Examples:
        >>> placeholder(3)
        '$3'
    """
    return f"${index}"


def build_positional_placeholders(count: int, start: int = 1) -> List[str]:
    """
    Build ``count`` consecutive placeholders.

    Examples:
        >>> build_positional_placeholders(3)
        ['$1', '$2', '$3']
        >>> build_positional_placeholders(0)
        []
    """
    return [placeholder(i) for i in range(start, start + count)]


class ParameterSink:
    """
    Collects bound values and hands out the next placeholder for each one.

    Example:
        >>> sink = ParameterSink()
        >>> sink.add("%Vancouver%")
        '$1'
        >>> sink.add(5000)
        '$2'
        >>> sink.values
        ('%Vancouver%', 5000)
    """

    def __init__(self, start_index: int = 1):
        self.next_index = start_index
        self._values: List[Any] = []

    def add(self, value: Any) -> str:
        ph = placeholder(self.next_index)
        self.next_index += 1
        self._values.append(value)
        return ph

    @property
    def values(self) -> Tuple[Any, ...]:
        return tuple(self._values)
