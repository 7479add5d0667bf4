from typing import List, Optional

import strawberry
from strawberry.types import Info

from film_graphql.applications.graphql.types import CreateFilmInput, FilmType, parse_film_id
from film_graphql.applications.use_cases.film.create_film import CreateFilmUseCase
from film_graphql.applications.use_cases.film.get_film import GetFilmUseCase
from film_graphql.applications.use_cases.film.get_films import GetFilmsUseCase


async def get_films(info: Info, first: Optional[int] = None, offset: Optional[int] = None) -> List[FilmType]:
    async with info.context.films() as film_repository:
        films = await GetFilmsUseCase(film_repository).execute(first=first, offset=offset)
    return [FilmType.from_domain(film) for film in films]


async def get_film(info: Info, id: strawberry.ID) -> Optional[FilmType]:
    film_id = parse_film_id(id)
    async with info.context.films() as film_repository:
        film = await GetFilmUseCase(film_repository).execute(film_id)
    return FilmType.from_domain(film) if film else None


async def create_film(info: Info, input: CreateFilmInput) -> Optional[FilmType]:
    film_data = input.to_domain()
    async with info.context.films() as film_repository:
        film = await CreateFilmUseCase(film_repository).execute(film_data)
    return FilmType.from_domain(film) if film else None
