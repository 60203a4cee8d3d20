"""
FastAPI routes for authentication endpoints.
Handles user registration, login, logout and the current-user lookup.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Header, status
from fastapi.responses import JSONResponse
import logging

from .dependencies import get_auth_service, get_current_user
from .models import Credentials, PublicUser, SuccessResponse
from .service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


def _success(data, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=SuccessResponse(data=data.model_dump()).model_dump()
    )


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    credentials: Credentials,
    auth_service: AuthService = Depends(get_auth_service)
) -> JSONResponse:
    """
    Register a new user account.

    Returns 201 on success, 400 if the username exists, 500 on any other failure.
    """
    result = await auth_service.signup(credentials.username, credentials.password)
    return _success(result, status.HTTP_201_CREATED)


@router.post("/login")
async def login(
    credentials: Credentials,
    auth_service: AuthService = Depends(get_auth_service)
) -> JSONResponse:
    """
    Authenticate user and return a session token.

    Returns 401 for unknown users and wrong passwords alike.
    """
    result = await auth_service.login(credentials.username, credentials.password)
    return _success(result)


@router.post("/logout")
async def logout(
    authorization: Optional[str] = Header(None),
    auth_service: AuthService = Depends(get_auth_service)
) -> JSONResponse:
    """
    Revoke the bearer token.

    Returns 401 without a token, 400 for an invalid token, 500 if revocation fails.
    """
    result = await auth_service.logout(authorization)
    return _success(result)


@router.get("/me")
async def me(user: PublicUser = Depends(get_current_user)) -> JSONResponse:
    """Return the user identified by a live, unrevoked token."""
    return JSONResponse(content=SuccessResponse(data={"user": user.model_dump()}).model_dump())
