"""Database Session Manager: async connection pool, rollback, error translation, health checks.

Invariants:
    - Every session rolls back on exception (no partial commits leak)
    - Pool is bounded: pool_size = connection limit, no overflow, callers wait
    - SQLAlchemy exceptions leave translate_storage_errors as ConflictError or StorageError

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Production relaxes TLS verification (managed MySQL hosts ship self-signed certs)
"""

import logging
import ssl
from collections.abc import Iterator
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from lifelink.core.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)

_MYSQL_DUP_ENTRY = 1062
_PG_UNIQUE_VIOLATION = "23505"


def engine_options(
    database_url: str | URL,
    pool_size: int = 10,
    pool_timeout: float = 30.0,
    relax_tls: bool = False,
) -> dict:
    """Keyword arguments for create_async_engine. Pure, no IO."""
    url = make_url(database_url)
    options: dict = {"pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_recycle=3600,
        )
    if relax_tls and url.get_backend_name() != "sqlite":
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        options["connect_args"] = {"ssl": context}
    return options


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(self, database_url: str | URL, **options):
        self.engine = create_async_engine(
            database_url, **engine_options(database_url, **options),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (startup and readiness checks)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str | URL, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session


# ─── Error translation ──────────────────────────────────────────

def backend_message(exc: SQLAlchemyError) -> str:
    """Driver-level error text without SQLAlchemy's statement dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def is_duplicate_key(exc: IntegrityError) -> bool:
    """True when the integrity error is a unique/primary key collision."""
    orig = exc.orig
    args = getattr(orig, "args", ())
    if args and args[0] == _MYSQL_DUP_ENTRY:
        return True
    if getattr(orig, "sqlstate", None) == _PG_UNIQUE_VIOLATION:
        return True
    if getattr(orig, "pgcode", None) == _PG_UNIQUE_VIOLATION:
        return True
    text_ = str(orig)
    return "UNIQUE constraint failed" in text_ or "Duplicate entry" in text_


@contextmanager
def translate_storage_errors(
    failure_message: str, conflict_message: str | None = None,
) -> Iterator[None]:
    """Map SQLAlchemy failures raised inside the block to domain errors."""
    try:
        yield
    except IntegrityError as e:
        if conflict_message and is_duplicate_key(e):
            logger.warning(f"Duplicate key: {backend_message(e)}")
            raise ConflictError(conflict_message) from e
        logger.error(f"DB integrity error: {backend_message(e)}")
        raise StorageError(failure_message, backend_message(e)) from e
    except SQLAlchemyError as e:
        logger.error(f"DB error: {backend_message(e)}")
        raise StorageError(failure_message, backend_message(e)) from e
