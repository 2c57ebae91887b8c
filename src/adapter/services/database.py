"""Database engine and session factory

The engine is created by the process bootstrap (app factory or CLI) and
handed to whoever needs sessions. Nothing here is module-level state.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Imported for table registration on SQLModel.metadata
from src.domain.user import User  # noqa: F401
from src.domain.transaction import Transaction  # noqa: F401


def create_engine_from_config(config) -> AsyncEngine:
    """
    Build an AsyncEngine from ApplicationConfig-style settings

    Pool sizing only applies to pooled URIs; in-memory SQLite uses a
    single static connection.
    """
    kwargs = {"echo": bool(config.DB_ECHO), "future": True}
    if ":memory:" not in config.DB_URI:
        kwargs.update(
            pool_size=config.DB_POOL_SIZE,
            max_overflow=config.DB_MAX_OVERFLOW,
            pool_timeout=config.DB_POOL_TIMEOUT,
        )
    engine = create_async_engine(config.DB_URI, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables if they do not exist"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
