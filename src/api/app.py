"""FastAPI application factory

Owns the lifecycle of process-wide resources: the database engine and the
password hasher are built here from config and kept on app.state.
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.api.error import register_error_handlers
from src.api.routes import accounts, transactions
from src.adapter.services.database import (
    create_engine_from_config,
    create_session_factory,
    init_db,
)
from src.adapter.services.password_hasher import BcryptPasswordHasher

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(config) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    engine = create_engine_from_config(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Failing to create the schema aborts startup
        await init_db(engine)
        logger.info("Database initialized")
        yield
        await engine.dispose()

    app = FastAPI(
        title="Money Tracker",
        version="1.0.0",
        description="Personal transaction ledger with per-user storage",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.password_hasher = BcryptPasswordHasher(rounds=config.BCRYPT_ROUNDS)

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %s (%.1f ms)",
                request.method, request.url.path, response.status_code, elapsed_ms,
            )
            return response

    register_error_handlers(app)

    app.include_router(accounts.router, prefix=config.API_PREFIX)
    app.include_router(transactions.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "ok"}

    if config.STATIC_DIR and os.path.isdir(config.STATIC_DIR):
        app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="static")

    return app
