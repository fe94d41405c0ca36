import asyncio
import functools
import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def get_database_type(url: str) -> str:
    """
    Extract database type from connection URL.

    Args:
        url: Database connection URL

    Returns:
        "sqlite" or "postgresql" or "unknown"
    """
    if url.startswith("sqlite"):
        return "sqlite"
    elif url.startswith("postgresql"):
        return "postgresql"
    return "unknown"


def create_engine_for(url: str) -> AsyncEngine:
    """
    Build an async engine with database-specific settings.

    SQLite (the default, e.g. sqlite+aiosqlite:///./fundumo.db) gets no connection
    pooling and WAL journaling; anything else gets a small pool.
    """
    if get_database_type(url) == "sqlite":
        engine = create_async_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,  # SQLite doesn't need connection pooling
        )

        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            """Use WAL so a reader never blocks the single writer."""
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

        logger.info("Database configured: SQLite (file-based, serialized writes)")
        return engine

    engine = create_async_engine(
        url,
        echo=False,
        pool_size=5,
        pool_pre_ping=True,  # Verify connections before use
    )
    logger.info(f"Database configured: {get_database_type(url)} (with connection pooling)")
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory with sensible defaults."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create the key-value table if it doesn't exist."""
    from infrastructure.database import models  # noqa: F401  (registers tables on Base)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def retry_on_db_lock(max_retries=5, initial_delay=0.1, backoff_factor=2):
    """Retry on SQLite 'database is locked' errors with exponential backoff."""

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            delay = initial_delay
            last_exc = None
            for attempt in range(max_retries):
                try:
                    return await func(*args, **kwargs)
                except Exception as exc:
                    if "database is locked" in str(exc).lower():
                        last_exc = exc
                        if attempt < max_retries - 1:
                            logger.warning(
                                f"SQLite locked (attempt {attempt + 1}/{max_retries}), "
                                f"retrying in {delay:.2f}s"
                            )
                            await asyncio.sleep(delay)
                            delay *= backoff_factor
                        continue
                    raise
            raise last_exc  # type: ignore[misc]

        return wrapper

    return decorator
