"""
JWT session token management.
Handles token issuance and verification, with an opt-out of the expiration check for logout.
"""

import time
from typing import Any, Callable, Dict
from jose import jwt, JWTError
from jose.exceptions import ExpiredSignatureError
import logging

from ..config import AuthSettings
from .errors import TokenExpiredError, TokenInvalidError

logger = logging.getLogger(__name__)


class TokenManager:
    """Issues and verifies signed, time-bounded session tokens."""

    def __init__(self, settings: AuthSettings, clock: Callable[[], float] = time.time):
        self.settings = settings
        self._clock = clock

    def issue(self, data: Dict[str, Any]) -> str:
        """
        Create a session token carrying the user's id and username.

        Args:
            data: Mapping with at least ``id`` and ``username``

        Returns:
            Encoded JWT token string

        Raises:
            ValueError: If required data is missing
        """
        if data.get("id") is None or not data.get("username"):
            raise ValueError("Token data must include 'id' and 'username'")

        to_encode = {
            "id": data["id"],
            "username": data["username"],
            "exp": int(self._clock()) + self.settings.token_ttl_seconds,
        }

        encoded_jwt = jwt.encode(
            to_encode,
            self.settings.jwt_secret,
            algorithm=self.settings.jwt_algorithm
        )
        logger.debug(f"Session token issued for user: {data['username']}")
        return encoded_jwt

    def verify(self, token: str, ignore_expiration: bool = False) -> Dict[str, Any]:
        """
        Verify token signature and return its claims.

        Args:
            token: JWT token to verify
            ignore_expiration: Accept a correctly signed token whose ``exp`` has passed

        Returns:
            Decoded claims

        Raises:
            TokenExpiredError: If the token expired and expiration is enforced
            TokenInvalidError: If the signature or payload is invalid
        """
        if not token:
            raise TokenInvalidError()

        try:
            return jwt.decode(
                token,
                self.settings.jwt_secret,
                algorithms=[self.settings.jwt_algorithm],
                options={"verify_exp": not ignore_expiration}
            )
        except ExpiredSignatureError:
            logger.info("Rejected expired session token")
            raise TokenExpiredError()
        except JWTError as e:
            logger.warning(f"JWT verification failed: {e}")
            raise TokenInvalidError()
