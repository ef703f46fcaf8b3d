"""Lifelink API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LifelinkError → envelope JSON responses
    - CORS configured from settings (unrestricted by default)
    - Database initialized on startup; a failed connectivity check is logged, not fatal

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Outside production `python -m lifelink.main` binds its own uvicorn listener;
      in production `app` is served by an external ASGI host
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lifelink.api.error_handlers import register_error_handlers
from lifelink.api.responses import PrettyJSONResponse
from lifelink.api.routes import donors, health, users
from lifelink.config import get_settings
from lifelink.infrastructure.database import init_db
from lifelink.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.sqlalchemy_url,
        pool_size=settings.db_connection_limit,
        pool_timeout=settings.db_pool_timeout,
        relax_tls=settings.is_production,
    )
    if await manager.health_check():
        logger.info("Connected to database")
    else:
        logger.error("Database connection failed; serving anyway")
    logger.info("Lifelink API started")
    yield
    await manager.dispose()
    logger.info("Lifelink API shutting down")


app = FastAPI(
    title="Lifelink API", version="1.0.0", lifespan=lifespan,
    default_response_class=PrettyJSONResponse,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(donors.router)

register_error_handlers(app)


def serve() -> None:
    """Bind a uvicorn listener unless running in production."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.is_production:
        logger.warning(
            "Production environment: not binding a listener, "
            "serve lifelink.main:app from the ASGI host",
        )
        return
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
