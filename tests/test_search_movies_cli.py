import json
from unittest.mock import MagicMock

import pytest

from film_graphql.domain.exceptions import UpstreamError
from film_graphql.domain.models.search_movie import SearchMovieResults
from film_graphql.presentation.cli import search_movies


@pytest.fixture
def fake_client(monkeypatch):
    client = MagicMock()
    factory = MagicMock(return_value=client)
    monkeypatch.setattr(search_movies, "TmdbClient", factory)
    return factory, client


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TMDB_API_KEY", raising=False)


def test_prints_results(fake_client, capsys):
    factory, client = fake_client
    client.search_movies.return_value = SearchMovieResults(page=1, total_pages=0, total_results=0, results=[])

    exit_code = search_movies.main(["Heat", "--api_key", "secret"])

    assert exit_code == 0
    factory.assert_called_once_with("secret", timeout=None)
    client.search_movies.assert_called_once_with("Heat")
    assert json.loads(capsys.readouterr().out)["total_results"] == 0


def test_key_from_environment(fake_client, monkeypatch):
    factory, client = fake_client
    client.search_movies.return_value = SearchMovieResults(page=1, total_pages=0, total_results=0, results=[])
    monkeypatch.setenv("TMDB_API_KEY", "from-env")

    assert search_movies.main(["Heat"]) == 0
    factory.assert_called_once_with("from-env", timeout=None)


def test_missing_key(fake_client, capsys):
    assert search_movies.main(["Heat"]) == 2
    assert "TMDB_API_KEY" in capsys.readouterr().err


def test_upstream_failure(fake_client, capsys):
    _, client = fake_client
    client.search_movies.side_effect = UpstreamError("TMDB search for 'Heat' failed: timeout")

    assert search_movies.main(["Heat", "--api_key", "secret"]) == 1
    assert "Search failed" in capsys.readouterr().err
