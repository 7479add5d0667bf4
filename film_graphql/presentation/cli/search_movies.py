import argparse
import sys
from typing import Optional, Sequence

from film_graphql.domain.exceptions import UpstreamError
from film_graphql.infrastructure.adapters.services.tmdb_client import TmdbClient
from film_graphql.infrastructure.config.settings import TmdbSettings
from film_graphql.infrastructure.logging.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search The Movie Database by title")
    parser.add_argument("title", type=str)
    parser.add_argument("--api_key", type=str, default=None, help="defaults to TMDB_API_KEY")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    tmdb_settings = TmdbSettings()

    api_key = args.api_key or tmdb_settings.api_key
    if not api_key:
        print("No TMDB api key: pass --api_key or set TMDB_API_KEY", file=sys.stderr)
        return 2

    client = TmdbClient(api_key, timeout=tmdb_settings.timeout)
    try:
        results = client.search_movies(args.title)
    except UpstreamError as e:
        print(f"Search failed: {e}", file=sys.stderr)
        return 1

    print(results.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
