from collections.abc import AsyncGenerator
from typing import Any
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from app.core.config import settings


def _async_database_url(url: str) -> str:
    # asyncpg does not accept psycopg params like sslmode/channel_binding.
    parsed = urlparse(url)
    if parsed.scheme != "postgresql":
        return url
    query = parse_qs(parsed.query, keep_blank_values=True)
    query.pop("sslmode", None)
    query.pop("channel_binding", None)
    new_query = urlencode(query, doseq=True)
    return urlunparse(("postgresql+asyncpg", parsed.netloc, parsed.path, parsed.params, new_query, parsed.fragment))


def _engine_options() -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.env == "development"}
    if settings.is_postgres:
        options.update(
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=10,
            connect_args={"ssl": True},  # asyncpg uses this instead of sslmode
        )
    return options


engine = create_async_engine(_async_database_url(settings.database_url), **_engine_options())

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create tables if using create_all; prefer Alembic in production."""
    import app.models  # noqa: F401 - register tables

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
