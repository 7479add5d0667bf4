from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from film_graphql.domain.exceptions import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"


class TmdbSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="TMDB_", extra="ignore")

    api_key: Optional[str] = None
    timeout: Optional[float] = None


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        missing = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(f"Invalid or missing configuration: {', '.join(missing)} must be set") from e
