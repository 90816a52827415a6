"""FastAPI application wiring for the authentication service.

Run with:
    uvicorn app:create_app --factory --app-dir backend

Configuration is read once here and handed to the components; see
``infrastructure.config`` for the environment variables.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

import structlog
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

from api.context import GraphQLContext, create_context
from api.schema import create_schema
from application.auth.service import AuthenticationService
from domain.auth.core.ports.user_directory import IUserDirectory
from infrastructure.auth.auth_middleware import AuthMiddleware
from infrastructure.auth.bcrypt_hasher import BcryptCredentialHasher
from infrastructure.auth.directory_factory import get_user_directory
from infrastructure.auth.jwt_token_issuer import JwtTokenIssuer
from infrastructure.auth.jwt_token_verifier import JwtTokenVerifier
from infrastructure.auth.mongo_user_directory import MongoUserDirectory
from infrastructure.config import (
    get_app_version,
    get_bcrypt_rounds,
    get_jwt_secret,
    get_log_level,
)

logger = structlog.get_logger("startup")


def configure_logging(level: str) -> None:
    """Configure structlog once per process."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level, logging.INFO)
        ),
    )


def create_app(directory: Optional[IUserDirectory] = None) -> FastAPI:
    """Build the FastAPI app with the GraphQL endpoint mounted at /graphql.

    Args:
        directory: User directory override (defaults to the env-selected one)

    Raises:
        ConfigurationError: If JWT_SECRET or another setting is invalid
    """
    load_dotenv()
    configure_logging(get_log_level())

    secret = get_jwt_secret()
    user_directory = directory or get_user_directory()
    auth_service = AuthenticationService(
        directory=user_directory,
        hasher=BcryptCredentialHasher(rounds=get_bcrypt_rounds()),
        issuer=JwtTokenIssuer(secret=secret),
    )
    version = get_app_version()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if isinstance(user_directory, MongoUserDirectory):
            await user_directory.ensure_indexes()
        logger.info(
            "lifespan.ready",
            directory=type(user_directory).__name__,
            version=version,
        )
        yield
        logger.info("lifespan.shutdown")

    app = FastAPI(title="Auth Service", version=version, lifespan=lifespan)
    app.state.auth_service = auth_service
    app.add_middleware(AuthMiddleware, verifier=JwtTokenVerifier(secret=secret))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": version}

    async def get_graphql_context(request: Request) -> GraphQLContext:
        return create_context(auth_service=auth_service, request=request)

    graphql_app: GraphQLRouter[Any, Any] = GraphQLRouter(
        create_schema(), context_getter=get_graphql_context
    )
    app.include_router(graphql_app, prefix="/graphql")

    return app
