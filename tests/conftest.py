"""Test fixtures for BandRank."""

from __future__ import annotations

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_song_store
from app.core.exceptions import StoreUnavailableError
from app.main import app
from app.models.song import Song
from app.models.vote import BattleVote


def make_song(song_id: int, rating: float = 1500.0, **kwargs: object) -> Song:
    """Build a detached Song with the fields the rating engine cares about."""
    return Song(
        id=song_id,
        title=kwargs.pop("title", f"Song {song_id}"),
        artist=kwargs.pop("artist", "The Testers"),
        rating=rating,
        **kwargs,
    )


class InMemorySongStore:
    """SongStore double. ``atomic()`` restores ratings and votes on error."""

    def __init__(self, songs: list[Song] | None = None) -> None:
        self.songs: dict[int, Song] = {s.id: s for s in songs or []}
        self.votes: list[BattleVote] = []
        self.lock_order: list[int] = []
        self.list_calls: list[tuple[int, bool]] = []
        self.fail_on_vote_insert = False
        self.atomic_entries = 0

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        self.atomic_entries += 1
        ratings = {song_id: song.rating for song_id, song in self.songs.items()}
        votes = list(self.votes)
        try:
            yield
        except Exception:
            for song_id, rating in ratings.items():
                if song_id in self.songs:
                    self.songs[song_id].rating = rating
            self.votes = votes
            raise

    async def list_songs(self, limit: int, order_by_rating_desc: bool = True) -> list[Song]:
        self.list_calls.append((limit, order_by_rating_desc))
        if order_by_rating_desc:
            ordered = sorted(self.songs.values(), key=lambda s: (-s.rating, s.id))
        else:
            ordered = sorted(self.songs.values(), key=lambda s: (s.title, s.id))
        return ordered[:limit]

    async def count_songs(self) -> int:
        return len(self.songs)

    async def get_song(self, song_id: int, for_update: bool = False) -> Song | None:
        if for_update:
            self.lock_order.append(song_id)
        return self.songs.get(song_id)

    async def find_song(self, artist: str, title: str) -> Song | None:
        for song in self.songs.values():
            if song.artist == artist and song.title == title:
                return song
        return None

    async def add_song(self, song: Song) -> Song:
        song.id = max(self.songs, default=0) + 1
        song.created_at = datetime.now(timezone.utc)
        self.songs[song.id] = song
        return song

    async def delete_song(self, song_id: int) -> bool:
        return self.songs.pop(song_id, None) is not None

    async def update_ratings(
        self, song_a_id: int, new_rating_a: float, song_b_id: int, new_rating_b: float,
    ) -> None:
        self.songs[song_a_id].rating = new_rating_a
        self.songs[song_b_id].rating = new_rating_b

    async def reset_ratings(self, rating: float) -> int:
        for song in self.songs.values():
            song.rating = rating
        return len(self.songs)

    async def insert_vote_record(
        self, song_a_id: int, song_b_id: int, winner_id: int | None, voter_id: str | None = None,
    ) -> BattleVote:
        if self.fail_on_vote_insert:
            raise StoreUnavailableError("vote log unavailable")
        vote = BattleVote(
            id=len(self.votes) + 1,
            song_a_id=song_a_id,
            song_b_id=song_b_id,
            winner_id=winner_id,
            voter_id=voter_id,
            created_at=datetime.now(timezone.utc),
        )
        self.votes.append(vote)
        return vote

    async def list_votes(self, limit: int) -> list[BattleVote]:
        return list(reversed(self.votes))[:limit]

    async def recent_votes(self, voter_id: str, since: datetime) -> list[BattleVote]:
        return [v for v in self.votes if v.voter_id == voter_id and v.created_at >= since]


@pytest.fixture
def store() -> InMemorySongStore:
    return InMemorySongStore()


@pytest.fixture
async def client(store: InMemorySongStore) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_song_store() -> InMemorySongStore:
        return store

    app.dependency_overrides[get_song_store] = override_get_song_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
