"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from user_registry.api.controllers.responses import server_error
from user_registry.api.http.app_data import ApplicationDependencies
from user_registry.api.http.routers import health, users
from user_registry.api.utils.app_startup import configure_logging
from user_registry.core.providers import Argon2Hash, LoguruLoggerProvider
from user_registry.core.services.database.db_session import DbSessionService
from user_registry.runtime.config.config_data import ConfigData
from user_registry.runtime.context import get_config


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        return response


async def log_requests(request: Request, call_next):
    """Attach a request id and log the start, end or failure of each request."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            failure = server_error(exc, request_id)
            return JSONResponse(
                status_code=failure.status_code,
                content=failure.content(),
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        ).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


def build_dependencies(config: ConfigData) -> ApplicationDependencies:
    """Create the process-wide resources. Called once per application."""
    database_service = DbSessionService(config.database)
    database_service.create_all()
    return ApplicationDependencies(
        config=config,
        database_service=database_service,
        hash_provider=Argon2Hash(config.hashing.to_options()),
        logger_provider=LoguruLoggerProvider({"app": "user-registry"}),
    )


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Configuration to use; defaults to the current app context.
    """
    config = config or get_config()
    configure_logging(config)

    if config.app.environment == "production" and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up application in {} environment", config.app.environment)
        app.state.app_dependencies = build_dependencies(config)
        try:
            yield
        finally:
            logger.info("Shutting down application")
            app.state.app_dependencies.database_service.dispose()

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="User Registry API",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    app.include_router(health.router)
    app.include_router(users.router)

    return app
