"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from loguru import logger
from starlette.responses import JSONResponse

from bookery.api.http.app_data import ApplicationDependencies
from bookery.api.http.routers import (
    author_router,
    book_router,
    costumer_router,
    health_router,
    rental_router,
)
from bookery.api.utils.app_startup import configure_logging
from bookery.core.exceptions import BookeryError, RecordNotFoundError
from bookery.runtime.context import get_config


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the HTTP application.

    When ``dependencies`` is omitted they are built from the current
    configuration at startup and disposed of at shutdown. Dependencies passed
    in belong to the caller, which keeps them alive across application
    restarts (tests share one in-memory database this way).
    """
    owns_dependencies = dependencies is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        config = get_config()
        if app.state.app_dependencies is None:
            app.state.app_dependencies = ApplicationDependencies.from_config(config)
        logger.info("Starting up application in {} environment", config.app.environment)
        app.state.app_dependencies.database_service.create_all()
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if owns_dependencies:
                app.state.app_dependencies.database_service.dispose()

    production = get_config().app.environment == "production"
    app = FastAPI(
        title="bookery",
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None if production else "/redoc",
    )
    app.state.app_dependencies = dependencies

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        logger.info("{}", exc)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(BookeryError)
    async def bookery_error(request: Request, exc: BookeryError) -> JSONResponse:
        logger.error("Request failed", error_type=type(exc).__name__, error_message=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        base_ctx = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }

        start = time.perf_counter()

        # Everything that logs within this block inherits base_ctx
        with logger.contextualize(**base_ctx):
            try:
                logger.info("request.start")
                response = await call_next(request)

                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=response.status_code,
                    duration_ms=round(duration_ms, 1),
                ).info("request.end")

                response.headers.setdefault("X-Request-ID", request_id)
                return response

            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=500,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                return JSONResponse(
                    status_code=500,
                    content={"detail": "Internal Server Error", "request_id": request_id},
                    headers={"X-Request-ID": request_id},
                )

    app.include_router(health_router)
    app.include_router(author_router)
    app.include_router(book_router)
    app.include_router(costumer_router)
    app.include_router(rental_router)

    return app


def build_app() -> FastAPI:
    """Entry point for ``uvicorn --factory``: configure logging, then build."""
    configure_logging()
    return create_app()
