"""
Authentication service implementing signup, login and logout.
Hashes passwords, issues session tokens, and revokes tokens on logout with a TTL that follows the token's expiration.
"""

import asyncio
import time
from typing import Callable, Optional
import logging

from ..config import AuthSettings
from ..database.users import DuplicateKeyError
from .errors import (
    DuplicateUserError,
    InvalidCredentialsError,
    LogoutError,
    PersistenceError,
    TokenInvalidError,
    TokenMissingError,
)
from .hashing import PasswordHasher
from .models import LoginResult, LogoutResult, PublicUser, SignupResult
from .revocation import TokenRevocationStore
from .token import TokenManager

logger = logging.getLogger(__name__)

SIGNUP_OK = "Usuário criado com sucesso."
SIGNUP_FAILED = "Erro ao criar usuário."
LOGIN_OK = "Login realizado com sucesso."
LOGIN_FAILED = "Erro ao realizar login."
LOGOUT_OK = "Logout realizado com sucesso. Token invalidado."


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header value.

    Raises:
        TokenMissingError: If the header is absent or not a bearer credential
    """
    if not authorization:
        raise TokenMissingError()

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise TokenMissingError()
    return parts[1]


class AuthService:
    """Session manager: the only entry point the HTTP layer calls."""

    def __init__(
        self,
        settings: AuthSettings,
        users,
        hasher: PasswordHasher,
        tokens: TokenManager,
        revocations: TokenRevocationStore,
        clock: Callable[[], float] = time.time
    ):
        self.settings = settings
        self.users = users
        self.hasher = hasher
        self.tokens = tokens
        self.revocations = revocations
        self._clock = clock
        logger.info("AuthService initialized")

    async def signup(self, username: str, password: str) -> SignupResult:
        """
        Register a new user. No token is issued at signup.

        Raises:
            DuplicateUserError: If the username is taken, with the store's message
            PersistenceError: On any other failure
        """
        try:
            pwd_hash = await asyncio.to_thread(self.hasher.hash, password)
            await self.users.create_user(username, pwd_hash)
        except DuplicateKeyError as e:
            logger.warning(f"Signup rejected, username already exists: {username}")
            raise DuplicateUserError(e.message)
        except Exception as e:
            logger.error(f"Registration failed: {e}")
            raise PersistenceError(SIGNUP_FAILED) from e

        logger.info(f"User registered successfully: {username}")
        return SignupResult(message=SIGNUP_OK)

    async def login(self, username: str, password: str) -> LoginResult:
        """
        Authenticate a user and issue a session token.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password does not match
            PersistenceError: On any other failure
        """
        try:
            user = await self.users.get_user_by_username(username)
            if user is None:
                logger.warning(f"Failed login attempt for: {username}")
                raise InvalidCredentialsError()

            if not await asyncio.to_thread(self.hasher.verify, password, user.password_hash):
                logger.warning(f"Failed login attempt for: {username}")
                raise InvalidCredentialsError()

            token = self.tokens.issue({"id": user.id, "username": user.username})
        except InvalidCredentialsError:
            raise
        except Exception as e:
            logger.error(f"Login failed: {e}")
            raise PersistenceError(LOGIN_FAILED) from e

        logger.info(f"User logged in successfully: {username}")
        return LoginResult(
            message=LOGIN_OK,
            token=token,
            user=PublicUser(id=user.id, username=user.username)
        )

    async def logout(self, authorization: Optional[str]) -> LogoutResult:
        """
        Revoke the bearer token until it would have expired on its own.

        Already-expired tokens are still revoked, for the fallback TTL.
        Repeated logouts with the same token each write the entry again.

        Raises:
            TokenMissingError: If no bearer token was sent
            TokenInvalidError: If the token is not correctly signed or has no ``exp``
            LogoutError: If the revocation store fails
        """
        token = extract_bearer_token(authorization)

        claims = self.tokens.verify(token, ignore_expiration=True)
        exp = claims.get("exp")
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            logger.warning("Logout rejected, token has no expiration claim")
            raise TokenInvalidError()

        remaining = int(exp) - int(self._clock())
        ttl = remaining if remaining > 0 else self.settings.revocation_fallback_ttl

        try:
            await self.revocations.revoke(token, ttl)
        except Exception as e:
            logger.error(f"Logout failed: {e}")
            raise LogoutError() from e

        logger.info(f"User logged out: {claims.get('username')}")
        return LogoutResult(message=LOGOUT_OK)
