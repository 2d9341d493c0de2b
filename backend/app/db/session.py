"""Async engine and session factory for the clinic database."""

from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import get_settings

_engines: dict[str, AsyncEngine] = {}
_sessionmakers: dict[str, async_sessionmaker[AsyncSession]] = {}


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str) -> AsyncEngine:
    """Create an engine for ``database_url``.

    SQL statement logging is left to the ``sqlalchemy.engine`` logger, which
    ``configure_logging`` raises to INFO when ``DATABASE_ECHO`` is set. SQLite
    connections enforce foreign keys so pets and visits cannot outlive their
    owner.
    """
    engine = create_async_engine(database_url)
    if make_url(database_url).get_backend_name() == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_sessionmaker(
    database_url: str | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Return the cached sessionmaker for ``database_url`` (or the configured URL)."""
    url = database_url or get_settings().database_url
    sessionmaker = _sessionmakers.get(url)
    if sessionmaker is None:
        engine = build_engine(url)
        sessionmaker = async_sessionmaker(engine, expire_on_commit=False)
        _engines[url] = engine
        _sessionmakers[url] = sessionmaker
    return sessionmaker


async def get_session() -> AsyncIterator[AsyncSession]:
    async with get_sessionmaker()() as session:
        yield session


async def dispose_engine(database_url: str | None = None) -> None:
    """Close the pooled connections for ``database_url`` and forget its factory."""
    url = database_url or get_settings().database_url
    _sessionmakers.pop(url, None)
    engine = _engines.pop(url, None)
    if engine is not None:
        await engine.dispose()
