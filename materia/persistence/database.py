"""Engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from materia.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg engine shared by the whole application.

    Args:
        database: Connection URL and pool sizing
        echo: Log every statement, for debugging

    Returns:
        Async engine with a pre-pinged connection pool
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory of per-request sessions.

    Rows are mapped to domain models as soon as they are read, so nothing
    needs to be refreshed after a commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
