"""
Core LightBnbRepository class.

The repository composes table operations from sibling mixins and owns the one
place where statements meet the database.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from lightbnb.config import StoreErrorPolicy, get_settings
from lightbnb.infrastructure.database.exceptions import InvalidInputError, StoreError
from lightbnb.infrastructure.sql import CompiledQuery
from lightbnb.utils.logging import get_logger

from .property_ops import PropertyOpsMixin
from .reservation_ops import ReservationOpsMixin
from .user_ops import UserOpsMixin

logger = get_logger(__name__)

Record = Dict[str, Any]


class LightBnbRepository(UserOpsMixin, ReservationOpsMixin, PropertyOpsMixin):
    """
    Async data-access layer for the LightBnB schema.

    Every accessor issues exactly one statement and maps the row set to a
    single record, None, or a list of records.

    Store errors (connection failures, constraint violations, syntax errors)
    are always logged as ``repository.query_failed``. What happens next
    depends on ``error_policy``:

    - ``"log"``: the accessor resolves to None, so a failure looks the same
      as "no match" to the caller.
    - ``"raise"``: StoreError is raised from the driver error.

    InvalidInputError from the query builders is raised before any round trip
    and is never swallowed.

    Example:
        >>> from lightbnb.infrastructure.database import get_engine
        >>> repo = LightBnbRepository(get_engine())
        >>> user = await repo.get_user_with_email("tristanjacobs@gmail.com")
    """

    def __init__(
        self,
        engine: AsyncEngine,
        *,
        error_policy: Optional[StoreErrorPolicy] = None,
        default_limit: Optional[int] = None,
        log: Optional[Any] = None,
    ) -> None:
        """
        Args:
            engine: AsyncEngine owning the connection pool.
            error_policy: "log" or "raise"; defaults to settings.
            default_limit: Row limit for listings called without one.
            log: structlog-style logger receiving query events.
        """
        settings = get_settings()
        self.engine = engine
        self.error_policy = error_policy or settings.store_error_policy
        self.default_limit = default_limit or settings.default_result_limit
        self.log = log or logger

        if self.error_policy not in ("log", "raise"):
            raise InvalidInputError(f"Unknown store error policy: {self.error_policy!r}")

    def _resolve_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidInputError(f"limit must be a positive integer, got {limit!r}")
        return limit

    async def _fetch_rows(
        self, operation: str, query: CompiledQuery
    ) -> Optional[List[Record]]:
        """
        Run ``query`` and return its rows as plain dicts.

        Returns None when the statement fails under the "log" policy.
        """
        try:
            async with self.engine.connect() as conn:
                result = await conn.exec_driver_sql(query.text, query.values)
                rows = [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            # DBAPIError.__str__ embeds the bound parameters; log the driver message only
            cause = getattr(e, "orig", None) or e
            self.log.error(
                "repository.query_failed",
                operation=operation,
                error_type=type(cause).__name__,
                error=str(cause),
            )
            if self.error_policy == "raise":
                raise StoreError(operation, str(cause)) from e
            return None

        self.log.debug(
            f"repository.{operation}.completed",
            row_count=len(rows),
        )
        return rows

    async def _fetch_one(
        self, operation: str, query: CompiledQuery
    ) -> Optional[Record]:
        rows = await self._fetch_rows(operation, query)
        if not rows:
            return None
        return rows[0]
