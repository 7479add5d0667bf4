from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from film_graphql.domain.ports.repositories.film_repository import FilmRepository
from film_graphql.infrastructure.adapters.repositories.sqlalchemy_film_repository import SQLAlchemyFilmRepository
from film_graphql.infrastructure.config.settings import load_settings


class _EngineStore:
    engine: Optional[AsyncEngine] = None


def set_engine(engine: AsyncEngine) -> None:
    _EngineStore.engine = engine


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        settings = load_settings()
        _EngineStore.engine = create_async_engine(settings.DATABASE_URL)
    return _EngineStore.engine


@asynccontextmanager
async def film_repository_scope() -> AsyncIterator[FilmRepository]:
    """Check a connection out of the pool for one storage operation.

    The session is closed, and its connection returned to the pool, whether
    the body completes or raises.
    """
    engine = get_engine()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield SQLAlchemyFilmRepository(session)


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None
