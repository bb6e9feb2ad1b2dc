"""Database connection and session management."""
from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from mototrack.config.settings import get_settings
from mototrack.core.logging import get_logger

logger = get_logger(__name__)

settings = get_settings()


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def _unicode_lower(value):
    return value.lower() if value is not None else None


def _configure_sqlite_connection(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Built-in lower() only folds ASCII, so "DISPONÍVEL" would never match "disponível"
    dbapi_connection.create_function("lower", 1, _unicode_lower)


def create_engine(url: str | None = None, echo: bool | None = None, **engine_kwargs) -> AsyncEngine:
    """Create the database engine.

    SQLite engines get foreign key enforcement switched on so that deleting a
    referenced row fails the same way it does on PostgreSQL, and a Unicode
    aware ``lower()`` so case-insensitive filters fold accented letters too.
    """
    url = url or settings.database_url
    kwargs: dict = {
        "echo": settings.database_echo if echo is None else echo,
        "future": True,
    }
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_recycle=300,
            pool_pre_ping=True,
        )
    kwargs.update(engine_kwargs)

    async_engine = create_async_engine(url, **kwargs)

    if url.startswith("sqlite"):
        event.listen(async_engine.sync_engine, "connect", _configure_sqlite_connection)

    return async_engine


engine = create_engine()

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency that provides a database session for one request.

    The session is committed when the handler returns normally and rolled back
    if it raises.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(target: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Models must be imported so their tables are registered on Base.metadata
    import mototrack.models  # noqa: F401

    target = target or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_initialized", url=target.url.render_as_string(hide_password=True))


async def close_engine() -> None:
    """Dispose the engine and its connection pool."""
    await engine.dispose()
