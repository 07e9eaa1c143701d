"""
CustomerDesk Backend — Database Connection Management
=======================================================

What:  The persistence client: an async SQLAlchemy engine plus session
       factory owned by one explicitly constructed `Database` object.
How:   `create_app()` builds a `Database` (or receives one), stores it on
       `app.state.database`, and disposes it at shutdown. Route handlers get
       a per-request session through the `get_db_session` dependency, which
       commits on success and rolls back on error.
Who:   The app factory, the health route, the dependency below, and tests
       (which point a `Database` at a temporary SQLite file).
When:  Engine created once at startup; sessions created per request.

Connection Pooling:
    pool_size / max_overflow come from settings for server databases.
    SQLite URLs skip the sizing arguments.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object between the models, `Database.create_all`
    and Alembic.
    """
    pass


class Database:
    """
    Owns the engine and session factory for one database URL.

    Lifecycle:
        1. Constructed once (app startup or test fixture)
        2. `session()` hands out one transactional session per unit of work
        3. `dispose()` closes every pooled connection at shutdown
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        engine_kwargs = {"echo": echo}
        if not url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=pool_pre_ping,
                pool_recycle=3600,
            )
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)

        # expire_on_commit=False: services serialize records right after
        # committing them
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional session.

        How it works:
            1. Creates a new session from the factory
            2. Yields it to the caller
            3. On success: commits
            4. On error: rolls back and re-raises
            5. Always: closes the session (returns connection to pool)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def ping(self) -> bool:
        """Runs `SELECT 1`; returns False instead of raising when unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def create_all(self) -> None:
        """Create any missing tables (development and tests; production uses Alembic)."""
        # Models register themselves on Base.metadata at import
        import app.models.customer  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Gracefully closes all connections in the pool."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Uses the `Database` stored on the application by `create_app()`.

    Example usage in a route:
        @router.get("/customer")
        async def list_customers(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialized; was the app created with create_app()?")
    async with database.session() as session:
        yield session
