"""
Pydantic models for authentication and user management.
Defines request bodies, stored user records and response payloads.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Signup and login request body. Never persisted."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserRecord(BaseModel):
    """Row of the users table."""
    id: int
    username: str
    password_hash: str


class PublicUser(BaseModel):
    """User data safe to return to clients."""
    id: int
    username: str


class TokenClaims(BaseModel):
    """Decoded session token payload."""
    id: int
    username: str
    exp: int


class SignupResult(BaseModel):
    message: str


class LoginResult(BaseModel):
    message: str
    token: str
    user: PublicUser


class LogoutResult(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    """Uniform envelope for successful operations."""
    success: bool = True
    data: Any = None


class ErrorResponse(BaseModel):
    """Uniform envelope for failed operations."""
    success: bool = False
    error: Optional[str] = None
