from abc import ABC, abstractmethod

from film_graphql.domain.models.search_movie import SearchMovieResults


class MovieMetadataPort(ABC):
    @abstractmethod
    def search_movies(self, title: str) -> SearchMovieResults:
        pass
