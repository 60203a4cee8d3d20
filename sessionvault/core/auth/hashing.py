"""
Password hashing utilities using bcrypt for secure password storage.
The work factor comes from AuthSettings so tests can run with a cheap cost.
"""

from passlib.context import CryptContext
import logging

from .errors import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """One-way salted bcrypt hashing with constant-time verification."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds
        )

    def hash(self, password: str) -> str:
        """
        Hash a plain text password using bcrypt.

        Args:
            password: Plain text password to hash

        Returns:
            Hashed password string, different on every call

        Raises:
            ValueError: If password is empty or None
            HashingError: If the bcrypt backend fails
        """
        if not password:
            raise ValueError("Password cannot be empty")

        try:
            hashed = self._context.hash(password)
            logger.debug("Password hashed successfully")
            return hashed
        except Exception as e:
            logger.error(f"Password hashing failed: {e}")
            raise HashingError() from e

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against its hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Stored hash to verify against

        Returns:
            True if password matches, False otherwise
        """
        if not plain_password or not hashed_password:
            return False

        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            # Unrecognized or corrupt hash in storage
            logger.error(f"Password verification failed: {e}")
            return False
