import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from film_graphql.domain.models.film import CreateFilm, Film


class FilmRepository(ABC):
    @abstractmethod
    async def list_films(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Film]:
        pass

    @abstractmethod
    async def get_film(self, film_id: uuid.UUID) -> Optional[Film]:
        pass

    @abstractmethod
    async def create_film(self, film: CreateFilm) -> Optional[Film]:
        pass
