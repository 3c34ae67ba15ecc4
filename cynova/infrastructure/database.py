"""Database Session Manager — async engine, per-request sessions and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - SQLAlchemy exceptions escaping a session are mapped to StoreError
    - SQLite connections run with foreign keys on and case-sensitive LIKE,
      so substring filters behave the same as on PostgreSQL

Design Decisions:
    - The manager is an explicit object built in the lifespan and stored on
      app.state; get_db reads it from the request — no module-level client
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

import cynova.models  # noqa: F401  (populates Base.metadata)
from cynova.core.errors import StoreError, StoreErrorKind
from cynova.db.base import Base

logger = logging.getLogger(__name__)


def _json_serializer(value) -> str:
    return json.dumps(value, ensure_ascii=False)


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create an async engine with the catalog's JSON and SQLite settings."""
    engine = create_async_engine(
        database_url, json_serializer=_json_serializer, **kwargs,
    )
    configure_sqlite_engine(engine)
    return engine


def configure_sqlite_engine(engine: AsyncEngine) -> None:
    """Apply per-connection pragmas on SQLite engines (no-op elsewhere)."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA case_sensitive_like=ON")
        cursor.close()


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with rollback on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = build_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an existing engine (test fixtures, scripts)."""
        manager = cls.__new__(cls)
        manager.engine = engine
        manager._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )
        return manager

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except StoreError:
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StoreError(StoreErrorKind.OTHER, "session") from e
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create missing tables (development convenience; migrations own prod)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    manager: DatabaseSessionManager | None = getattr(request.app.state, "db", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session
