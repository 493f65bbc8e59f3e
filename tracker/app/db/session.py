"""
Database session configuration.

This module handles engine creation and session factories using
SQLAlchemy with async support (aiosqlite by default, asyncpg for PostgreSQL).
"""

from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from tracker.app.core.config import settings


def create_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Build an async engine for the given URL (defaults to settings).

    Pool sizing only applies to server databases; SQLite picks its own pool.
    """
    url = database_url or settings.database_url
    options = {"echo": settings.db_echo, "future": True}
    if make_url(url).get_backend_name() != "sqlite":
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return create_async_engine(url, **options)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Session factory handed to repositories."""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Create async engine
engine = create_engine()

# Create async session factory
AsyncSessionLocal = create_session_factory(engine)

# Create declarative base for models
Base = declarative_base()


async def create_tables(bind: AsyncEngine) -> None:
    """Create all mapped tables that do not exist yet."""
    # Models must be imported so they are registered with Base
    from tracker.app.models.parcel import Parcel  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
