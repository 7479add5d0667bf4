from typing import Optional

from film_graphql.domain.models.film import CreateFilm, Film
from film_graphql.domain.ports.repositories.film_repository import FilmRepository
from film_graphql.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateFilmUseCase:
    def __init__(self, film_repository: FilmRepository):
        self.film_repository = film_repository

    async def execute(self, film_data: CreateFilm) -> Optional[Film]:
        logger.info(f"Creating film: {film_data.title}")

        created_film = await self.film_repository.create_film(film_data)

        if created_film is None:
            logger.warning(f"Insert of film '{film_data.title}' returned no row")
            return None

        logger.info(f"Film created successfully: {created_film.id}")
        return created_film
