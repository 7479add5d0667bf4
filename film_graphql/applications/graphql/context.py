from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Callable

from film_graphql.domain.ports.repositories.film_repository import FilmRepository

FilmRepositoryProvider = Callable[[], AbstractAsyncContextManager[FilmRepository]]


@dataclass(frozen=True)
class GraphQLContext:
    """Per-request context handed to every resolver.

    Its only capability is opening a storage scope.
    """

    film_repository_provider: FilmRepositoryProvider

    def films(self) -> AbstractAsyncContextManager[FilmRepository]:
        return self.film_repository_provider()
