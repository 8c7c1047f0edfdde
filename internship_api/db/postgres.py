"""
PostgreSQL access - one shared async engine (connection pool) per process.

The engine is created lazily on first use. Concurrent first callers share
the same in-flight creation; if it fails the memo is dropped so the next
request starts a fresh attempt.

Usage:
    engine = await get_pool_manager().acquire()
    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any, Awaitable, Callable, Dict, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from internship_api.core.config import get_settings
from internship_api.core.errors import AppError, DatabaseFailure

logger = logging.getLogger(__name__)

# returns the shared engine when awaited
EngineSource = Callable[[], Awaitable[AsyncEngine]]


class ConnectionPoolManager:
    """
    Single-flight lazy initializer for the shared AsyncEngine.

    The pending creation task is the only synchronization point:
    the first caller installs it, everyone else awaits it.
    """

    def __init__(
        self,
        url: str,
        engine_factory: Callable[..., AsyncEngine] = create_async_engine,
        **engine_options: Any
    ):
        self._url = url
        self._engine_factory = engine_factory
        self._engine_options = engine_options
        self._pending: Optional[asyncio.Future] = None

    async def acquire(self) -> AsyncEngine:
        """Return the shared engine, creating it on first use."""
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._create())
        # shield: a disconnecting client must not cancel creation for the others
        return await asyncio.shield(self._pending)

    async def _create(self) -> AsyncEngine:
        engine = None
        try:
            url = make_url(self._url)
            logger.info(
                "Connecting to database: user=%s host=%s database=%s",
                url.username, url.host, url.database
            )
            engine = self._engine_factory(self._url, **self._engine_options)
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            # reset so the next call can retry
            self._pending = None
            logger.error("Database connection failed: %s", e)
            if engine is not None:
                await engine.dispose()
            raise
        logger.info("Connected to database")
        return engine

    @property
    def is_ready(self) -> bool:
        # a failed attempt clears _pending, so a finished task is a ready engine
        return self._pending is not None and self._pending.done()


@lru_cache()
def get_pool_manager() -> ConnectionPoolManager:
    """Get the process-wide pool manager (singleton)."""
    settings = get_settings()
    options: Dict[str, Any] = {"echo": settings.debug}
    if make_url(settings.postgres_url).get_backend_name() == "postgresql":
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            connect_args={
                "timeout": settings.db_connect_timeout,
                "command_timeout": settings.db_command_timeout,
            },
        )
    return ConnectionPoolManager(settings.postgres_url, **options)


async def get_engine() -> AsyncEngine:
    """
    Await the shared engine, reporting connection errors as DatabaseFailure.
    Usage:
        engine = await get_engine()
        async with engine.connect() as conn:
            ...
    """
    try:
        return await get_pool_manager().acquire()
    except AppError:
        raise
    except Exception as e:
        raise DatabaseFailure(str(e)) from e


def get_engine_source() -> EngineSource:
    """
    Dependency handing routes the acquirer rather than the engine, so
    request validation runs before the pool is touched.
    Usage:
        @router.post("/students")
        async def add_student(data: StudentCreate, acquire: EngineSource = Depends(get_engine_source)):
            new_id = await create_student(acquire, data.model_dump())
    """
    return get_engine


@asynccontextmanager
async def database_errors():
    """Report driver and network failures as DatabaseFailure."""
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logger.error("Database error: %s", e)
        raise DatabaseFailure(str(e)) from e


async def test_postgres_connection() -> bool:
    """
    Test if PostgreSQL is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        engine = await get_pool_manager().acquire()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1 AS test"))
            return result.scalar() == 1
    except Exception as e:
        logger.warning("PostgreSQL connection failed: %s", e)
        return False
