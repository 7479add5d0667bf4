import uuid
from typing import Optional

from film_graphql.domain.models.film import Film
from film_graphql.domain.ports.repositories.film_repository import FilmRepository


class GetFilmUseCase:
    def __init__(self, film_repository: FilmRepository):
        self.film_repository = film_repository

    async def execute(self, film_id: uuid.UUID) -> Optional[Film]:
        # an unknown id is a null result, not an error
        return await self.film_repository.get_film(film_id)
