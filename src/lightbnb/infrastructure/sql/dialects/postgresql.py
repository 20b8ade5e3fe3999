"""
PostgreSQL-specific SQL dialect implementation.

Provides PostgreSQL-specific syntax for INSERT statements: $n placeholders and
the RETURNING clause.
"""

from typing import List, Optional

from ..core.identifier import ensure_identifiers, qualify_table
from ..core.parameters import build_positional_placeholders


class PostgreSQLDialect:
    """PostgreSQL SQL dialect implementation."""

    name = "postgresql"

    def qualify(self, table: str, schema: Optional[str] = None) -> str:
        """Create a validated table reference."""
        return qualify_table(table, schema)

    def placeholders(self, count: int) -> List[str]:
        """Positional placeholders $1..$count."""
        return build_positional_placeholders(count)

    def build_insert(
        self,
        table: str,
        columns: List[str],
        placeholders: List[str],
        schema: Optional[str] = None,
        returning: bool = True,
    ) -> str:
        """
        Build a single-row INSERT statement.

        Args:
            table: Table name
            columns: List of column names
            placeholders: List of parameter placeholders
            schema: Optional schema name
            returning: Append RETURNING * so the inserted row comes back

        Returns:
            INSERT SQL statement terminated by a semicolon

        Example:
            >>> PostgreSQLDialect().build_insert("users", ["name", "age"], ["$1", "$2"])
            'INSERT INTO users (name,age) VALUES ($1,$2) RETURNING *;'
        """
        qualified_table = self.qualify(table, schema)
        column_list = ",".join(ensure_identifiers(columns))
        values = ",".join(placeholders)
        returning_clause = " RETURNING *" if returning else ""
        return (
            f"INSERT INTO {qualified_table} ({column_list}) "
            f"VALUES ({values}){returning_clause};"
        )
