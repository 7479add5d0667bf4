import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from film_graphql.domain.exceptions import ClientInputError, StorageError
from film_graphql.domain.models.film import CreateFilm
from film_graphql.domain.models.film import Film as DomainFilm
from film_graphql.domain.ports.repositories.film_repository import FilmRepository
from film_graphql.infrastructure.logging.logger import Logger
from film_graphql.infrastructure.persistence.models import Film as SQLFilm

logger = Logger.get_logger(__name__)


class SQLAlchemyFilmRepository(FilmRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_film: SQLFilm) -> DomainFilm:
        return DomainFilm(
            id=sql_film.id,
            created_at=sql_film.created_at,
            updated_at=sql_film.updated_at,
            title=sql_film.title,
            release_year=sql_film.release_year,
            summary=sql_film.summary,
            runtime_mins=sql_film.runtime_mins,
        )

    async def list_films(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[DomainFilm]:
        if limit is not None and limit < 0:
            raise ClientInputError("limit must be a non-negative integer")
        if offset is not None and offset < 0:
            raise ClientInputError("offset must be a non-negative integer")

        query = select(SQLFilm)
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        try:
            result = await self.session.scalars(query)
            sql_films = result.all()
        except SQLAlchemyError as e:
            logger.exception("Failed to list films")
            raise StorageError("Failed to load films") from e
        return [self._to_domain(sql_film) for sql_film in sql_films]

    async def get_film(self, film_id: uuid.UUID) -> Optional[DomainFilm]:
        try:
            sql_film = await self.session.get(SQLFilm, film_id)
        except SQLAlchemyError as e:
            logger.exception(f"Failed to load film {film_id}")
            raise StorageError(f"Failed to load film {film_id}") from e
        return self._to_domain(sql_film) if sql_film else None

    async def create_film(self, film: CreateFilm) -> Optional[DomainFilm]:
        sql_film = SQLFilm(
            title=film.title,
            release_year=film.release_year,
            summary=film.summary,
            runtime_mins=film.runtime_mins,
        )
        try:
            self.session.add(sql_film)
            await self.session.commit()
            await self.session.refresh(sql_film)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to insert film '{film.title}'")
            raise StorageError("Failed to create film") from e

        if sql_film.id is None:
            return None
        return self._to_domain(sql_film)
