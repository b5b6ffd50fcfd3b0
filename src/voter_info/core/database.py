"""Async database engine and session management.

Provides async engine creation, session factory, and lifecycle helpers
using SQLAlchemy 2.x.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Return the current async engine.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _engine is None:
        msg = "Database engine not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the current session factory.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _session_factory is None:
        msg = "Session factory not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _session_factory


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement so contest deletes cascade on SQLite."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, _record) -> None:  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_engine(database_url: str, **kwargs: object) -> AsyncEngine:
    """Create and store the async engine and session factory.

    Args:
        database_url: Async SQLAlchemy connection string.
        **kwargs: Additional arguments passed to create_async_engine.

    Returns:
        The created async engine.
    """
    global _engine, _session_factory  # noqa: PLW0603
    # Only set pool defaults for connection-pooled engines (not SQLite/StaticPool)
    is_sqlite = "sqlite" in database_url
    uses_static_pool = kwargs.get("poolclass") is StaticPool or is_sqlite
    if not uses_static_pool:
        kwargs.setdefault("pool_size", 10)
        kwargs.setdefault("max_overflow", 5)
    _engine = create_async_engine(database_url, **kwargs)
    if is_sqlite:
        _enable_sqlite_foreign_keys(_engine)
    _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _engine


async def create_all() -> None:
    """Create every table registered on the ORM metadata.

    Used for throwaway SQLite stores; managed databases go through Alembic.
    """
    from voter_info.models import Base

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose of the async engine and release connections."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
