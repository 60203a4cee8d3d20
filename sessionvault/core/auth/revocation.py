"""
Server-side token revocation backed by Redis.
Entries are keyed by the SHA-256 of the raw token and expire on their own.
"""

import hashlib
import logging
import redis.asyncio as redis
from redis.exceptions import RedisError

from ..config import AuthSettings
from .errors import StoreUnavailableError

logger = logging.getLogger(__name__)

REVOKED_FLAG = "true"


def create_redis_client(settings: AuthSettings) -> redis.Redis:
    """Build the Redis client used for revocation entries."""
    return redis.from_url(
        settings.redis_url,
        encoding="utf8",
        decode_responses=True,
        socket_timeout=settings.redis_timeout,
        socket_connect_timeout=settings.redis_timeout
    )


class TokenRevocationStore:
    """Blacklist of revoked session tokens with self-expiring entries."""

    def __init__(self, redis_client: redis.Redis, key_prefix: str = "blacklist:jwt:"):
        self.redis_client = redis_client
        self.key_prefix = key_prefix

    def key_for(self, token: str) -> str:
        """Derive the store key from the token hash, so the token itself is never stored."""
        token_hash = hashlib.sha256(token.encode("utf-8")).hexdigest()
        return f"{self.key_prefix}{token_hash}"

    async def revoke(self, token: str, ttl_seconds: int) -> None:
        """
        Mark a token as revoked for ``ttl_seconds``.

        Raises:
            StoreUnavailableError: If Redis cannot be reached or times out
        """
        key = self.key_for(token)
        try:
            await self.redis_client.setex(key, ttl_seconds, REVOKED_FLAG)
        except RedisError as e:
            logger.error(f"Failed to write revocation entry: {e}")
            raise StoreUnavailableError() from e
        logger.debug(f"Token revoked for {ttl_seconds}s")

    async def is_revoked(self, token: str) -> bool:
        """
        Check whether a token has a live revocation entry.

        Raises:
            StoreUnavailableError: If Redis cannot be reached or times out
        """
        try:
            return bool(await self.redis_client.exists(self.key_for(token)))
        except RedisError as e:
            logger.error(f"Failed to read revocation entry: {e}")
            raise StoreUnavailableError() from e
