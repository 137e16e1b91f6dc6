"""Tests for the BandRank exception hierarchy."""

from app.core.exceptions import (
    BandRankError,
    ConflictError,
    NotFoundError,
    SongNotFoundError,
    StoreUnavailableError,
    ValidationError,
)


class TestExceptions:
    def test_status_codes(self):
        assert NotFoundError("Song", 1).status_code == 404
        assert SongNotFoundError(1).status_code == 404
        assert ConflictError("dup").status_code == 409
        assert ValidationError("bad").status_code == 422
        assert StoreUnavailableError("down").status_code == 503

    def test_song_not_found_message(self):
        exc = SongNotFoundError(42)
        assert exc.message == "Song with id '42' not found"
        assert exc.song_id == 42

    def test_hierarchy(self):
        assert issubclass(SongNotFoundError, NotFoundError)
        for cls in (NotFoundError, ConflictError, ValidationError, StoreUnavailableError):
            assert issubclass(cls, BandRankError)
