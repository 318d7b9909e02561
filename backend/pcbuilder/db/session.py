"""Async SQLAlchemy access to the hosted catalog database.

The catalog is owned by the storefront; this service only reads it. Sessions
never commit, and the app keeps serving the stateless endpoints when the
database cannot be reached.
"""

import logging
from collections.abc import AsyncIterator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from pcbuilder.config import Settings, get_settings

logger = logging.getLogger(__name__)

_db_available = False


class Base(DeclarativeBase):
    """Declarative base for the catalog table mappings."""

    pass


def _async_url(settings: Settings) -> str:
    # asyncpg driver for plain postgresql:// URLs
    return settings.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)


def build_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        _async_url(settings),
        echo=settings.debug,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


engine = build_engine(get_settings())

catalog_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency — one read-only session per request."""
    async with catalog_session_factory() as session:
        try:
            yield session
        finally:
            # Nothing is ever written; just end the implicit transaction
            await session.rollback()


async def init_db() -> None:
    """Probe the catalog database once at startup."""
    global _db_available
    target = make_url(_async_url(get_settings()))
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as exc:
        _db_available = False
        logger.warning(
            "Catalog database %s@%s unavailable, serving stateless endpoints "
            "only (catalog endpoints answer 503): %s",
            target.database,
            target.host,
            exc,
        )
        return

    _db_available = True
    logger.info("Catalog database %s@%s connected.", target.database, target.host)


async def close_db() -> None:
    await engine.dispose()


def is_db_available() -> bool:
    return _db_available
