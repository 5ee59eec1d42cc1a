"""Engine and session factory for the task tracker database."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.config import Settings, get_settings
from .base import metadata


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the async engine for ``settings.database_url``.

    SQLite connections are shared across the event loop's threads, so the
    driver's same-thread check is disabled for them.
    """
    options: dict[str, Any] = {"echo": settings.db_echo}
    if settings.database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_pre_ping"] = True
    return create_async_engine(settings.database_url, **options)


engine = create_engine_from_settings(get_settings())
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db() -> None:
    """Create the tables from model metadata (``DB_CREATE_ALL``)."""
    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)


async def dispose_engine() -> None:
    await engine.dispose()
