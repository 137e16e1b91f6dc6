from enum import Enum

from pydantic import BaseModel

# Song and vote ids are Postgres INTEGER columns
MAX_SONG_ID = 2_147_483_647


class SongOrder(str, Enum):
    RATING = "rating"
    TITLE = "title"


class ErrorResponse(BaseModel):
    error: str
    type: str
