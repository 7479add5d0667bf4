import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Film(BaseModel):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    title: str
    release_year: int
    summary: str
    runtime_mins: int
    model_config = ConfigDict(from_attributes=True)


class CreateFilm(BaseModel):
    title: str = Field(min_length=1)
    release_year: int = Field(ge=INT32_MIN, le=INT32_MAX)
    summary: str = ""
    runtime_mins: int = Field(ge=INT32_MIN, le=INT32_MAX)
