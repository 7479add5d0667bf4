import uuid
from datetime import datetime

import strawberry
from pydantic import ValidationError

from film_graphql.domain.exceptions import ClientInputError
from film_graphql.domain.models.film import CreateFilm, Film


def parse_film_id(value) -> uuid.UUID:
    """Parse a film id in its hyphenated 8-4-4-4-12 form."""
    if not isinstance(value, str):
        raise ClientInputError(f"Film id must be a string, got {type(value).__name__}")
    try:
        film_id = uuid.UUID(value)
    except ValueError:
        film_id = None
    if film_id is None or str(film_id) != value.lower():
        raise ClientInputError(f"Invalid film id '{value}': expected a hyphenated UUID")
    return film_id


@strawberry.type(name="Film")
class FilmType:
    id: strawberry.ID
    created_at: datetime
    updated_at: datetime
    title: str
    release_year: int
    summary: str
    runtime_mins: int

    @classmethod
    def from_domain(cls, film: Film) -> "FilmType":
        return cls(
            id=strawberry.ID(str(film.id)),
            created_at=film.created_at,
            updated_at=film.updated_at,
            title=film.title,
            release_year=film.release_year,
            summary=film.summary,
            runtime_mins=film.runtime_mins,
        )


@strawberry.input(name="CreateFilmInput")
class CreateFilmInput:
    title: str
    release_year: int
    summary: str
    runtime_mins: int

    def to_domain(self) -> CreateFilm:
        try:
            return CreateFilm(
                title=self.title,
                release_year=self.release_year,
                summary=self.summary,
                runtime_mins=self.runtime_mins,
            )
        except ValidationError as e:
            fields = ", ".join(str(error["loc"][0]) for error in e.errors())
            raise ClientInputError(f"Invalid film input: {fields}") from e
