"""SQLAlchemy async engine and session factory construction."""

from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _ensure_sqlite_directory(async_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    prefix = "sqlite+aiosqlite:///"
    if not async_url.startswith(prefix):
        return
    db_path = async_url[len(prefix):]
    if db_path and db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def create_session_factory(
    database_url: str, *, echo: bool = False
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Build an async engine and its session factory for ``database_url``."""
    async_url = _get_async_url(database_url)
    _ensure_sqlite_directory(async_url)

    engine = create_async_engine(async_url, echo=echo, future=True)
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    return engine, session_factory
