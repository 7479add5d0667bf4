from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class SearchMovie(BaseModel):
    id: int
    title: str
    original_title: str
    original_language: str
    overview: Optional[str] = None
    release_date: Optional[date] = None
    genre_ids: List[int] = Field(default_factory=list)
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    popularity: float
    adult: bool

    @field_validator("release_date", mode="before")
    @classmethod
    def parse_release_date(cls, value):
        # TMDB sends "" instead of omitting unknown release dates
        if value is None or value == "":
            return None
        if isinstance(value, str):
            return date.fromisoformat(value)
        return value


class SearchMovieResults(BaseModel):
    page: int
    total_pages: int
    total_results: int
    results: List[SearchMovie] = Field(default_factory=list)
