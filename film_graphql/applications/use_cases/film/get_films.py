from typing import List, Optional

from film_graphql.domain.models.film import Film
from film_graphql.domain.ports.repositories.film_repository import FilmRepository


class GetFilmsUseCase:
    def __init__(self, film_repository: FilmRepository):
        self.film_repository = film_repository

    async def execute(self, first: Optional[int] = None, offset: Optional[int] = None) -> List[Film]:
        return await self.film_repository.list_films(limit=first, offset=offset)
