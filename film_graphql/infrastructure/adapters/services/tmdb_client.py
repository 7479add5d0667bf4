from typing import Optional

import requests
from pydantic import ValidationError

from film_graphql.domain.exceptions import UpstreamError
from film_graphql.domain.models.search_movie import SearchMovieResults
from film_graphql.domain.ports.services.movie_metadata_service import MovieMetadataPort
from film_graphql.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class TmdbClient(MovieMetadataPort):
    """Thin client for The Movie Database search endpoint."""

    BASE_URL = "https://api.themoviedb.org/3"

    def __init__(self, api_key: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        if not api_key:
            raise ValueError("A TMDB api key is required")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def search_movies(self, title: str) -> SearchMovieResults:
        url = f"{self.BASE_URL}/search/movie"
        logger.debug(f"Searching TMDB for '{title}'")

        try:
            response = self.session.get(
                url, params={"api_key": self.api_key, "query": title}, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise UpstreamError(f"TMDB search for '{title}' failed: {e}") from e

        try:
            return SearchMovieResults.model_validate(response.json())
        except ValidationError as e:
            raise UpstreamError(f"TMDB returned an unexpected payload: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"TMDB returned invalid JSON: {e}") from e
