from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Genre(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class MovieSummary(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str = Field(min_length=1)
    poster_path: Optional[str] = None
    overview: str = ""
    vote_average: Optional[float] = Field(default=None, ge=0, le=10)
    release_date: Optional[str] = None  # YYYY-MM-DD

    @field_validator("overview", mode="before")
    @classmethod
    def _overview_not_null(cls, value):
        return value or ""

    @field_validator("release_date", mode="before")
    @classmethod
    def _empty_date_is_absent(cls, value):
        return value or None


class MovieDetail(MovieSummary):
    backdrop_path: Optional[str] = None
    tagline: Optional[str] = None
    runtime_minutes: Optional[int] = Field(default=None, ge=0, alias="runtime")
    genres: list[Genre] = Field(default_factory=list)
    budget: Optional[int] = Field(default=None, ge=0)
    revenue: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = None
    original_language: Optional[str] = None
