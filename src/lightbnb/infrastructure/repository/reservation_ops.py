"""
Reservation table operations mixin.
"""

from typing import Any, Dict, List, Optional

from lightbnb.infrastructure.sql import CompiledQuery

_SELECT_GUEST_RESERVATIONS = """
SELECT reservations.*, properties.*, AVG(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
JOIN property_reviews ON property_reviews.property_id = reservations.property_id
WHERE reservations.guest_id = $1
GROUP BY reservations.id, properties.id
ORDER BY reservations.start_date
LIMIT $2;
""".strip()


class ReservationOpsMixin:
    """Mixin providing operations for the reservations table."""

    async def get_all_reservations(
        self, guest_id: int, limit: Optional[int] = None
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Get a guest's reservations, each joined with its property and the
        property's average rating, earliest start date first.

        Args:
            guest_id: The id of the guest user.
            limit: Maximum rows; defaults to the configured result limit.

        Returns:
            List of records; empty when the guest has no reservations.
        """
        query = CompiledQuery(
            text=_SELECT_GUEST_RESERVATIONS,
            values=(guest_id, self._resolve_limit(limit)),
        )
        return await self._fetch_rows("get_all_reservations", query)
