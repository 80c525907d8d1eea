"""Async SQLAlchemy engine and session dependency."""

from __future__ import annotations

import threading
from typing import AsyncIterator, Optional

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from eventreg.config import settings
from eventreg.models import Base

logger = structlog.get_logger()

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None
_init_lock = threading.Lock()


def _initialize() -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create the engine and session factory once (lazy init, lock-guarded)."""
    global _engine, _session_factory

    with _init_lock:
        if _engine is None or _session_factory is None:
            _engine = create_async_engine(settings.database_url, pool_pre_ping=True)
            _session_factory = async_sessionmaker(
                _engine, class_=AsyncSession, expire_on_commit=False
            )
            logger.info("database_engine_initialized", dialect=_engine.dialect.name)
        return _engine, _session_factory


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the process-wide session factory."""
    if _session_factory is not None:
        return _session_factory
    return _initialize()[1]


def get_engine() -> AsyncEngine:
    if _engine is not None:
        return _engine
    return _initialize()[0]


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding a database session."""
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables() -> None:
    """Create all tables known to the ORM metadata."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine, _session_factory

    with _init_lock:
        engine = _engine
        _engine = None
        _session_factory = None

    if engine is not None:
        await engine.dispose()
        logger.info("database_engine_disposed")
