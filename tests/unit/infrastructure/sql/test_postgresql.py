"""
Unit tests for the PostgreSQL dialect.
"""

import pytest

from lightbnb.infrastructure.database.exceptions import InvalidInputError
from lightbnb.infrastructure.sql.dialects.postgresql import PostgreSQLDialect


class TestPostgreSQLDialect:
    """Tests for PostgreSQL dialect."""

    @pytest.fixture
    def dialect(self):
        return PostgreSQLDialect()

    def test_dialect_name(self, dialect):
        assert dialect.name == "postgresql"

    def test_placeholders(self, dialect):
        assert dialect.placeholders(2) == ["$1", "$2"]

    def test_qualify_table(self, dialect):
        assert dialect.qualify("users", schema="public") == "public.users"

    def test_build_insert(self, dialect):
        sql = dialect.build_insert(
            table="users",
            columns=["name", "age"],
            placeholders=["$1", "$2"],
        )
        assert sql == "INSERT INTO users (name,age) VALUES ($1,$2) RETURNING *;"

    def test_build_insert_without_returning(self, dialect):
        sql = dialect.build_insert(
            table="users",
            columns=["name"],
            placeholders=["$1"],
            returning=False,
        )
        assert sql == "INSERT INTO users (name) VALUES ($1);"
        assert "RETURNING" not in sql

    def test_build_insert_with_schema(self, dialect):
        sql = dialect.build_insert("users", ["name"], ["$1"], schema="public")
        assert sql.startswith("INSERT INTO public.users (name)")

    def test_build_insert_rejects_bad_column(self, dialect):
        with pytest.raises(InvalidInputError):
            dialect.build_insert("users", ["name) VALUES ('x');--"], ["$1"])
