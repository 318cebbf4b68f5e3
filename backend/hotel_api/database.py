"""Async SQLAlchemy engine, session factory, and declarative base."""

from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from hotel_api.config import Settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine (connection pool) for the configured store."""
    if settings.is_sqlite:
        # SQLite has no server-side pool to size
        engine = create_async_engine(
            settings.async_database_url,
            echo=settings.debug,
            connect_args={"check_same_thread": False},
        )
        _serialize_sqlite_transactions(engine)
        return engine

    return create_async_engine(
        settings.async_database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
    )


def _serialize_sqlite_transactions(engine: AsyncEngine) -> None:
    """Open every SQLite transaction with ``BEGIN IMMEDIATE``.

    SQLite ignores ``SELECT ... FOR UPDATE`` and the driver defers ``BEGIN``
    until the first write, so the occupancy check and the insert would not
    be atomic. Taking the write lock up front serializes whole transactions;
    a second writer waits on the driver's busy timeout.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create the ``rooms`` and ``guests`` tables if they do not exist yet."""
    import hotel_api.models  # noqa: F401  # register tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield an async database session for FastAPI dependency injection.

    The session factory is owned by the application (``app.state``), so each
    app instance talks to its own store::

        @router.get("/rooms")
        async def list_rooms(db: AsyncSession = Depends(get_db)):
            ...

    The session is committed when the handler returns and rolled back when it
    raises.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
