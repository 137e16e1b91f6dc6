from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from app.config import settings
from app.rating.display import rating_to_stars


class SongCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    artist: str = Field(..., min_length=1, max_length=255)
    album: str | None = Field(default=None, max_length=255)
    release_year: int | None = Field(default=None, ge=1000, le=9999)

    model_config = {"str_strip_whitespace": True}


class SongResponse(BaseModel):
    id: int
    title: str
    artist: str
    album: str | None = None
    release_year: int | None = None
    rating: float
    album_art_url: str | None = None
    genre: str | None = None
    duration_ms: int | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stars(self) -> float:
        return rating_to_stars(
            self.rating,
            settings.display_min_rating,
            settings.display_max_rating,
        )


class SongListResponse(BaseModel):
    total: int
    limit: int
    items: list[SongResponse]
