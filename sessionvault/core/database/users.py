"""
User persistence on PostgreSQL through asyncpg.
Exposes the two parameterized queries the session manager needs.
"""

import asyncpg
import logging
from typing import Optional

from ..auth.models import UserRecord

logger = logging.getLogger(__name__)

INSERT_USER_SQL = "INSERT INTO users (username, password) VALUES ($1, $2)"
SELECT_USER_SQL = "SELECT * FROM users WHERE username = $1"


class DuplicateKeyError(Exception):
    """Unique constraint violation, carrying the database's own description."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserRepository:
    """Users table access keyed by username."""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    async def create_user(self, username: str, password_hash: str) -> None:
        """
        Insert a new user row.

        Raises:
            DuplicateKeyError: If the username is already taken
        """
        try:
            await self.pool.execute(INSERT_USER_SQL, username, password_hash)
        except asyncpg.UniqueViolationError as e:
            raise DuplicateKeyError(getattr(e, "message", None) or str(e)) from e

    async def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        """Return the user with this username, or None."""
        row = await self.pool.fetchrow(SELECT_USER_SQL, username)
        if row is None:
            return None
        return UserRecord(id=row["id"], username=row["username"], password_hash=row["password"])
