import sys

import uvicorn

from film_graphql.app import app
from film_graphql.domain.exceptions import ConfigurationError
from film_graphql.infrastructure.config.settings import load_settings
from film_graphql.infrastructure.logging.logger import Logger, setup_logging

logger = Logger.get_logger(__name__)


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(f"film-graphql: {e}")

    setup_logging(settings.LOG_LEVEL)

    logger.info(f"GraphQL API running on: {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
