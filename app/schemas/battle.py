from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import MAX_SONG_ID
from app.schemas.song import SongResponse


class PairingResponse(BaseModel):
    a: SongResponse
    b: SongResponse


class BattleSubmitRequest(BaseModel):
    # With skipped=True the two ids are just the pair shown, in no ranked order
    winner_id: int = Field(..., ge=1, le=MAX_SONG_ID)
    loser_id: int = Field(..., ge=1, le=MAX_SONG_ID)
    skipped: bool = False


class BattleSubmitResponse(BaseModel):
    ok: bool = True
    skipped: bool
    vote_id: int
    # New ratings after a decided battle; None for a skip
    winner_rating: float | None = None
    loser_rating: float | None = None


class BattleVoteResponse(BaseModel):
    id: int
    song_a_id: int
    song_b_id: int
    winner_id: int | None
    voter_id: str | None
    skipped: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class RatingResetResponse(BaseModel):
    count: int
    rating: float
