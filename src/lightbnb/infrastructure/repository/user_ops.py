"""
User table operations mixin.
"""

from typing import Any, Dict, Mapping, Optional

from lightbnb.infrastructure.sql import CompiledQuery

_SELECT_BY_EMAIL = "SELECT * FROM users WHERE email = $1 LIMIT 1;"
_SELECT_BY_ID = "SELECT * FROM users WHERE id = $1;"
_INSERT_USER = (
    "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *;"
)


class UserOpsMixin:
    """Mixin providing operations for the users table."""

    async def get_user_with_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get a single user given their email.

        Returns:
            The user record, or None if no user has that email.
        """
        query = CompiledQuery(text=_SELECT_BY_EMAIL, values=(email,))
        return await self._fetch_one("get_user_with_email", query)

    async def get_user_with_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """Get a single user given their id, or None."""
        query = CompiledQuery(text=_SELECT_BY_ID, values=(user_id,))
        return await self._fetch_one("get_user_with_id", query)

    async def add_user(self, user: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Add a new user.

        Args:
            user: Mapping with name, email and password. The password is
                expected to be hashed already.

        Returns:
            The inserted user record.
        """
        query = CompiledQuery(
            text=_INSERT_USER,
            values=(user.get("name"), user.get("email"), user.get("password")),
        )
        return await self._fetch_one("add_user", query)
