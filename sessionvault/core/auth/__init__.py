"""
Authentication and session module for SessionVault.
Provides password hashing, session tokens, token revocation and the session manager.
"""

from .errors import (
    AuthError,
    DuplicateUserError,
    InvalidCredentialsError,
    TokenMissingError,
    TokenInvalidError,
    TokenExpiredError,
    TokenRevokedError,
    PersistenceError,
    LogoutError,
    HashingError,
    StoreUnavailableError,
)
from .hashing import PasswordHasher
from .token import TokenManager
from .revocation import TokenRevocationStore, create_redis_client
from .service import AuthService, extract_bearer_token
from .models import Credentials, UserRecord, PublicUser, TokenClaims

__all__ = [
    "AuthError",
    "DuplicateUserError",
    "InvalidCredentialsError",
    "TokenMissingError",
    "TokenInvalidError",
    "TokenExpiredError",
    "TokenRevokedError",
    "PersistenceError",
    "LogoutError",
    "HashingError",
    "StoreUnavailableError",
    "PasswordHasher",
    "TokenManager",
    "TokenRevocationStore",
    "create_redis_client",
    "AuthService",
    "extract_bearer_token",
    "Credentials",
    "UserRecord",
    "PublicUser",
    "TokenClaims",
]
