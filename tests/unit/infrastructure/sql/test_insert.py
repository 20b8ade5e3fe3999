"""
Unit tests for the INSERT builder: number parsing, attribute normalization
and compiled statements.
"""

import math
from decimal import Decimal

import pytest

from lightbnb.infrastructure.database.exceptions import InvalidInputError
from lightbnb.infrastructure.sql.operations.insert import (
    InsertBuilder,
    build_insert_query,
    normalize_attributes,
    parse_number,
)


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("42", 42),
            ("  42  ", 42),
            ("-7", -7),
            ("+5", 5),
            ("1.5", 1.5),
            ("2.0", 2),
            (".5", 0.5),
            ("1e3", 1000),
            ("0x1F", 31),
            ("0", 0),
            ("", 0),
            ("   ", 0),
            (None, 0),
            (True, 1),
            (False, 0),
            (12, 12),
            (Decimal("9.99"), Decimal("9.99")),
        ],
    )
    def test_numeric_values(self, raw, expected):
        assert parse_number(raw) == expected

    def test_infinity(self):
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf

    @pytest.mark.parametrize("raw", ["5abc", "abc", "1,000", "nan", "inf", "1_000"])
    def test_not_a_number(self, raw):
        assert parse_number(raw) is None

    def test_float_nan_is_not_a_number(self):
        assert parse_number(float("nan")) is None

    def test_nested_values_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_number({"nested": 1})


class TestNormalizeAttributes:
    """Tests for normalize_attributes."""

    def test_zero_string_survives_as_number(self):
        attrs = {"age": "0"}
        normalize_attributes(attrs)
        assert attrs == {"age": 0}
        assert isinstance(attrs["age"], int)

    def test_zero_string_with_whitespace_survives(self):
        attrs = {"age": " 0 "}
        normalize_attributes(attrs)
        assert attrs == {"age": 0}

    @pytest.mark.parametrize("empty", ["", None, 0, False, Decimal("0")])
    def test_falsy_values_removed(self, empty):
        attrs = {"name": "Bob", "field": empty}
        normalize_attributes(attrs)
        assert attrs == {"name": "Bob"}

    def test_numeric_strings_converted(self):
        attrs = {"cost_per_night": "9300", "number_of_bathrooms": "1.5"}
        normalize_attributes(attrs)
        assert attrs == {"cost_per_night": 9300, "number_of_bathrooms": 1.5}

    @pytest.mark.parametrize("raw", ["5abc", "   ", "0.0", "-0", "Vancouver"])
    def test_non_numeric_or_quirky_strings_unchanged(self, raw):
        attrs = {"field": raw}
        normalize_attributes(attrs)
        assert attrs == {"field": raw}

    def test_mutates_in_place_and_keeps_order(self):
        attrs = {"c": "3", "skip": "", "a": "x", "b": "0"}
        same = attrs
        normalize_attributes(attrs)
        assert same is attrs
        assert list(attrs) == ["c", "a", "b"]


class TestBuildInsertQuery:
    """Tests for build_insert_query and InsertBuilder."""

    def test_example_users_row(self):
        query = build_insert_query({"name": "Bob", "age": "0"}, "users")
        assert query.text == "INSERT INTO users (name,age) VALUES ($1,$2) RETURNING *;"
        assert query.values == ("Bob", 0)

    def test_without_returning(self):
        query = build_insert_query({"name": "Bob"}, "users", return_record=False)
        assert query.text == "INSERT INTO users (name) VALUES ($1);"

    def test_blank_fields_omitted(self):
        query = build_insert_query(
            {"title": "Cabin", "description": "", "cost_per_night": "100"},
            "properties",
        )
        assert query.text == (
            "INSERT INTO properties (title,cost_per_night) VALUES ($1,$2) RETURNING *;"
        )
        assert query.values == ("Cabin", 100)

    def test_counts_match(self):
        attrs = {f"col_{i}": f"value {i}" for i in range(7)}
        query = build_insert_query(attrs, "things")
        columns = query.text.split("(")[1].split(")")[0].split(",")
        placeholders = query.text.split("VALUES (")[1].split(")")[0].split(",")
        assert len(columns) == len(query.values) == len(placeholders) == 7
        assert placeholders == [f"${i}" for i in range(1, 8)]

    def test_same_input_compiles_identically(self):
        first = build_insert_query({"name": "Bob", "age": "31"}, "users")
        second = build_insert_query({"name": "Bob", "age": "31"}, "users")
        assert first == second

    def test_empty_after_normalization_fails_fast(self):
        attrs = {"name": "", "age": ""}
        with pytest.raises(InvalidInputError, match="no non-empty attributes"):
            build_insert_query(attrs, "users")
        assert attrs == {}

    def test_empty_map_fails_fast(self):
        with pytest.raises(InvalidInputError):
            build_insert_query({}, "users")

    def test_unsafe_column_rejected(self):
        with pytest.raises(InvalidInputError):
            build_insert_query({"name) VALUES (1);--": "x"}, "users")

    def test_unsafe_table_rejected(self):
        with pytest.raises(InvalidInputError):
            build_insert_query({"name": "x"}, "users; DROP TABLE users")

    def test_builder_insert_text(self):
        builder = InsertBuilder()
        assert builder.dialect.name == "postgresql"
        assert builder.insert("users", ["name", "email", "password"]) == (
            "INSERT INTO users (name,email,password) VALUES ($1,$2,$3) RETURNING *;"
        )
