"""
Property search SELECT builder.

Assembles the property listing query clause by clause from optional search
criteria. The city predicate is always emitted (as a match-all pattern when no
city was asked for) so every later predicate can start with AND.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from lightbnb.infrastructure.database.exceptions import InvalidInputError

from ..core.parameters import ParameterSink
from ..core.query import CompiledQuery

DEFAULT_LIMIT = 10
CENTS_PER_UNIT = 100

_BASE_CLAUSE = (
    "SELECT properties.*, AVG(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)
_GROUP_BY_CLAUSE = "GROUP BY properties.id"
_ORDER_BY_CLAUSE = "ORDER BY cost_per_night"


class FilterOptions(BaseModel):
    """
    Optional search criteria for the property listing.

    Blank strings and None mean "not filtered". Prices are in major currency
    units; the compiler converts them to cents.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Decimal] = None
    maximum_price_per_night: Optional[Decimal] = None
    minimum_rating: Optional[Decimal] = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip() == "":
            return None
        return value


def to_minor_units(amount: Decimal) -> int:
    """
    Convert a major-unit price to integer minor units.

    Examples:
        >>> to_minor_units(Decimal("50"))
        5000
        >>> to_minor_units(Decimal("12.34"))
        1234
    """
    try:
        return int(Decimal(amount) * CENTS_PER_UNIT)
    except (InvalidOperation, ValueError, OverflowError) as e:
        raise InvalidInputError(f"Invalid price: {amount!r}") from e


def coerce_filter_options(
    options: Union[FilterOptions, Mapping[str, Any], None],
) -> FilterOptions:
    """Accept a FilterOptions, a plain mapping (e.g. query-string fields) or None."""
    if options is None:
        return FilterOptions()
    if isinstance(options, FilterOptions):
        return options
    try:
        return FilterOptions.model_validate(dict(options))
    except ValidationError as e:
        raise InvalidInputError(f"Invalid property search options: {e}") from e


class PropertySearchBuilder:
    """
    Builds the filtered property listing query.

    Clause order is fixed: base join, city, owner, minimum price, maximum
    price, GROUP BY, HAVING on rating, ORDER BY, LIMIT. Placeholders are
    numbered in the order the clauses are appended.
    """

    def build(
        self,
        options: Union[FilterOptions, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> CompiledQuery:
        opts = coerce_filter_options(options)
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidInputError(f"limit must be a positive integer, got {limit!r}")

        sink = ParameterSink()
        clauses: List[str] = [_BASE_CLAUSE]

        city_pattern = "%" + (opts.city or "") + "%"
        clauses.append(f"WHERE city LIKE {sink.add(city_pattern)}")
        if opts.owner_id:
            clauses.append(f"AND owner_id = {sink.add(opts.owner_id)}")
        if opts.minimum_price_per_night is not None:
            cents = to_minor_units(opts.minimum_price_per_night)
            clauses.append(f"AND cost_per_night >= {sink.add(cents)}")
        if opts.maximum_price_per_night is not None:
            cents = to_minor_units(opts.maximum_price_per_night)
            clauses.append(f"AND cost_per_night <= {sink.add(cents)}")

        clauses.append(_GROUP_BY_CLAUSE)
        if opts.minimum_rating:
            clauses.append(
                f"HAVING AVG(property_reviews.rating) >= {sink.add(opts.minimum_rating)}"
            )

        clauses.append(_ORDER_BY_CLAUSE)
        clauses.append(f"LIMIT {sink.add(limit)};")

        return CompiledQuery(text="\n".join(clauses), values=sink.values)


def build_property_search_query(
    options: Union[FilterOptions, Mapping[str, Any], None] = None,
    limit: int = DEFAULT_LIMIT,
) -> CompiledQuery:
    """Compile the property listing query for ``options``."""
    return PropertySearchBuilder().build(options, limit)
