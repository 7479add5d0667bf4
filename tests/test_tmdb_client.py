from datetime import date
from unittest.mock import Mock

import pytest
import requests

from film_graphql.domain.exceptions import UpstreamError
from film_graphql.domain.models.search_movie import SearchMovie
from film_graphql.infrastructure.adapters.services.tmdb_client import TmdbClient


def search_payload(**overrides) -> dict:
    movie = {
        "id": 949,
        "title": "Heat",
        "original_title": "Heat",
        "original_language": "en",
        "overview": "Obsessive master thief Neil McCauley leads a top-notch crew.",
        "release_date": "1995-12-15",
        "genre_ids": [28, 80, 18],
        "poster_path": "/umSVjVdbVwtx5ryCA2QXL44Durm.jpg",
        "backdrop_path": None,
        "popularity": 52.7,
        "adult": False,
    }
    movie.update(overrides)
    return {"page": 1, "total_pages": 1, "total_results": 1, "results": [movie]}


@pytest.fixture
def response():
    response = Mock(spec=requests.Response)
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session(response):
    session = Mock(spec=requests.Session)
    session.get.return_value = response
    return session


@pytest.fixture
def tmdb_client(session):
    return TmdbClient("secret", session=session)


class TestTmdbClient:
    def test_search_sends_key_and_title(self, tmdb_client, session, response):
        response.json.return_value = search_payload()

        results = tmdb_client.search_movies("Heat")

        session.get.assert_called_once_with(
            "https://api.themoviedb.org/3/search/movie",
            params={"api_key": "secret", "query": "Heat"},
            timeout=None,
        )
        assert results.page == 1
        assert results.total_results == 1
        movie = results.results[0]
        assert movie.id == 949
        assert movie.release_date == date(1995, 12, 15)
        assert movie.genre_ids == [28, 80, 18]
        assert movie.backdrop_path is None

    def test_empty_release_date_is_absent(self, tmdb_client, response):
        response.json.return_value = search_payload(release_date="")

        results = tmdb_client.search_movies("Heat")

        assert results.results[0].release_date is None

    def test_invalid_release_date_fails(self, tmdb_client, response):
        response.json.return_value = search_payload(release_date="not-a-date")

        with pytest.raises(UpstreamError, match="unexpected payload"):
            tmdb_client.search_movies("Heat")

    def test_invalid_json_fails(self, tmdb_client, response):
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)

        with pytest.raises(UpstreamError, match="invalid JSON"):
            tmdb_client.search_movies("Heat")

    def test_transport_failure(self, tmdb_client, session):
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(UpstreamError, match="failed"):
            tmdb_client.search_movies("Heat")

    def test_error_status(self, tmdb_client, response):
        response.raise_for_status.side_effect = requests.HTTPError("401 Client Error: Unauthorized")

        with pytest.raises(UpstreamError, match="401"):
            tmdb_client.search_movies("Heat")

    def test_api_key_required(self):
        with pytest.raises(ValueError):
            TmdbClient("")


class TestSearchMovie:
    @pytest.mark.parametrize(
        "raw, expected",
        [("", None), (None, None), ("2020-01-15", date(2020, 1, 15))],
    )
    def test_release_date_normalization(self, raw, expected):
        movie = SearchMovie.model_validate(search_payload(release_date=raw)["results"][0])

        assert movie.release_date == expected

    def test_missing_optional_fields(self):
        payload = search_payload()["results"][0]
        for key in ("overview", "release_date", "poster_path", "backdrop_path"):
            payload.pop(key)

        movie = SearchMovie.model_validate(payload)

        assert movie.overview is None
        assert movie.release_date is None
