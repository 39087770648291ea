"""Database engine and session management"""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
import structlog

from seatkit.config import settings

logger = structlog.get_logger()


class Base(DeclarativeBase):
    """Declarative base for ORM models"""


def _engine_options(url: str) -> dict:
    # SQLite's pool does not take sizing arguments
    if url.startswith("sqlite"):
        return {"echo": settings.db_echo}
    return {"echo": settings.db_echo, "pool_pre_ping": True, **settings.pool_options}


engine = create_async_engine(
    settings.effective_database_url,
    **_engine_options(settings.effective_database_url),
)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding a session per request"""
    async with SessionLocal() as session:
        yield session


async def close_database() -> None:
    """Release every pooled connection"""
    logger.info("Closing database connections")
    await engine.dispose()
    logger.info("Database connections closed")
