"""
Main FastAPI application entry point for SessionVault.
Wires configuration, PostgreSQL, Redis and the authentication service together.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn

from .health import router as health_router
from ...core.config import AuthSettings
from ...core.auth import (
    AuthError,
    AuthService,
    PasswordHasher,
    TokenManager,
    TokenRevocationStore,
    create_redis_client,
)
from ...core.auth.models import ErrorResponse
from ...core.auth.routes import router as auth_router
from ...core.database.connection import init_database
from ...core.database.users import UserRepository

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Usuário e senha são obrigatórios."
INTERNAL_ERROR = "Erro interno do servidor."


def configure_logging(settings: AuthSettings):
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    Opens the database pool and Redis client, and closes them on shutdown
    """
    settings = app.state.settings
    logger.info("Starting SessionVault...")

    database = await init_database(settings)
    redis_client = create_redis_client(settings)
    app.state.database = database
    app.state.redis = redis_client
    app.state.auth_service = AuthService(
        settings=settings,
        users=UserRepository(database.pool),
        hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        tokens=TokenManager(settings),
        revocations=TokenRevocationStore(redis_client, settings.revocation_key_prefix)
    )
    logger.info("Authentication service ready")

    try:
        yield
    finally:
        logger.info("Shutting down SessionVault...")
        await redis_client.aclose()
        await database.close()
        logger.info("Application shutdown complete")


def register_exception_handlers(app: FastAPI):
    """Map every failure onto the {success: false, error} envelope."""

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump()
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=MISSING_FIELDS).model_dump()
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=INTERNAL_ERROR).model_dump()
        )


def create_app(settings: Optional[AuthSettings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or AuthSettings.from_env()
    configure_logging(settings)

    app = FastAPI(
        title="SessionVault",
        description="Credential and session lifecycle service",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(auth_router)
    app.include_router(health_router)
    return app


if __name__ == "__main__":
    # Development server
    uvicorn.run(
        "sessionvault.services.api_gateway.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
