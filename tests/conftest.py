import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from testcontainers.postgres import PostgresContainer

from film_graphql.app import app
from film_graphql.applications.graphql.context import GraphQLContext
from film_graphql.domain.exceptions import ClientInputError, StorageError
from film_graphql.domain.models.film import CreateFilm, Film
from film_graphql.domain.ports.repositories.film_repository import FilmRepository
from film_graphql.infrastructure.config.dependencies import get_graphql_context
from film_graphql.infrastructure.persistence.models import table_registry


class InMemoryFilmRepository(FilmRepository):
    """Film storage kept in insertion order, standing in for the films table."""

    def __init__(self, films: Optional[List[Film]] = None):
        self.films: List[Film] = list(films or [])
        self.scopes_opened = 0
        self.scopes_closed = 0
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    async def list_films(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Film]:
        if limit is not None and limit < 0:
            raise ClientInputError("limit must be a non-negative integer")
        if offset is not None and offset < 0:
            raise ClientInputError("offset must be a non-negative integer")
        start = offset or 0
        end = None if limit is None else start + limit
        return self.films[start:end]

    async def get_film(self, film_id: uuid.UUID) -> Optional[Film]:
        return next((film for film in self.films if film.id == film_id), None)

    async def create_film(self, film: CreateFilm) -> Optional[Film]:
        self._clock += timedelta(minutes=1)
        created = Film(id=uuid.uuid4(), created_at=self._clock, updated_at=self._clock, **film.model_dump())
        self.films.append(created)
        return created

    @asynccontextmanager
    async def scope(self):
        self.scopes_opened += 1
        try:
            yield self
        finally:
            self.scopes_closed += 1


class FailingFilmRepository(InMemoryFilmRepository):
    async def list_films(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Film]:
        raise StorageError("Failed to load films")

    async def get_film(self, film_id: uuid.UUID) -> Optional[Film]:
        raise StorageError(f"Failed to load film {film_id}")


@pytest.fixture
def film_store():
    return InMemoryFilmRepository()


@pytest.fixture
def graphql_context(film_store):
    return GraphQLContext(film_repository_provider=film_store.scope)


@pytest_asyncio.fixture
async def client(graphql_context):
    """HTTP client against the app with storage swapped for the in-memory store"""

    app.dependency_overrides[get_graphql_context] = lambda: graphql_context

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def mock_film_repository():
    """Mock film repository for use case testing"""
    return AsyncMock(spec=FilmRepository)


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def postgres_engine(self):
        """Create test database engine"""
        with PostgresContainer("postgres:16", driver="psycopg") as postgres:
            engine = create_async_engine(postgres.get_connection_url())

            async with engine.begin() as conn:
                await conn.run_sync(table_registry.metadata.create_all)

            yield engine

            async with engine.begin() as conn:
                await conn.run_sync(table_registry.metadata.drop_all)
            await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, postgres_engine):
        """Create test database session"""
        async with AsyncSession(postgres_engine, expire_on_commit=False) as session:
            yield session
