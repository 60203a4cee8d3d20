"""
FastAPI dependencies for authenticated routes.
"""

from typing import Optional
from fastapi import Depends, Header, Request, status
from pydantic import ValidationError
import logging

from .errors import AuthError, StoreUnavailableError, TokenInvalidError, TokenRevokedError
from .models import PublicUser, TokenClaims
from .service import AuthService, extract_bearer_token

logger = logging.getLogger(__name__)


def get_auth_service(request: Request) -> AuthService:
    """Return the AuthService built during application startup."""
    return request.app.state.auth_service


async def get_current_user(
    authorization: Optional[str] = Header(None),
    auth_service: AuthService = Depends(get_auth_service)
) -> PublicUser:
    """
    Resolve the caller from a bearer token.

    Unlike logout, expiration is enforced and revoked tokens are refused.
    A revocation store outage is a generic server error.
    """
    token = extract_bearer_token(authorization)
    try:
        claims = auth_service.tokens.verify(token)
    except TokenInvalidError:
        raise TokenInvalidError(status_code=status.HTTP_401_UNAUTHORIZED)

    try:
        revoked = await auth_service.revocations.is_revoked(token)
    except StoreUnavailableError:
        raise AuthError()

    if revoked:
        logger.warning(f"Revoked token presented by: {claims.get('username')}")
        raise TokenRevokedError()

    try:
        parsed = TokenClaims(**claims)
    except ValidationError:
        raise TokenInvalidError(status_code=status.HTTP_401_UNAUTHORIZED)
    return PublicUser(id=parsed.id, username=parsed.username)
