"""Blind Beer Tasting API — FastAPI application.

Invariants:
    - Routers are included explicitly, in the order below
    - register_error_handlers(app) maps every failure to the error envelope
    - CORS origins come from settings; credentials allowed for the admin cookie
    - The lifespan configures logging and owns the database engine
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blindbeer.api.error_handlers import register_error_handlers
from blindbeer.api.routes import health, players, results, reveals, sessions
from blindbeer.config import get_settings
from blindbeer.infrastructure import database
from blindbeer.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Blind Beer API started")
    yield
    logger.info("Blind Beer API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Blind Beer Tasting API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(sessions.router)
app.include_router(players.router)
app.include_router(reveals.router)
app.include_router(results.router)

register_error_handlers(app)
