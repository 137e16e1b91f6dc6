"""Song and vote persistence used by the rating engine.

The battle service only talks to the ``SongStore`` protocol; the SQLAlchemy
implementation below is what the API wires in. Rating writes and the vote
insert for one battle are grouped with ``atomic()`` so they commit together
or not at all.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from datetime import datetime
from typing import Protocol

import structlog
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import StoreUnavailableError
from app.models.song import Song
from app.models.vote import BattleVote

logger = structlog.get_logger()

# Connectivity failures and timeouts; constraint violations propagate untouched
STORE_FAILURES = (OperationalError, InterfaceError, TimeoutError)


class SongStore(Protocol):
    def atomic(self) -> AbstractAsyncContextManager[None]: ...

    async def list_songs(self, limit: int, order_by_rating_desc: bool = True) -> list[Song]: ...

    async def count_songs(self) -> int: ...

    async def get_song(self, song_id: int, for_update: bool = False) -> Song | None: ...

    async def find_song(self, artist: str, title: str) -> Song | None: ...

    async def add_song(self, song: Song) -> Song: ...

    async def delete_song(self, song_id: int) -> bool: ...

    async def update_ratings(
        self, song_a_id: int, new_rating_a: float, song_b_id: int, new_rating_b: float,
    ) -> None: ...

    async def reset_ratings(self, rating: float) -> int: ...

    async def insert_vote_record(
        self, song_a_id: int, song_b_id: int, winner_id: int | None, voter_id: str | None = None,
    ) -> BattleVote: ...

    async def list_votes(self, limit: int) -> list[BattleVote]: ...

    async def recent_votes(self, voter_id: str, since: datetime) -> list[BattleVote]: ...


class SqlAlchemySongStore:
    """``SongStore`` backed by a request-scoped ``AsyncSession``."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Run the block in a transaction (or a savepoint if one is already open)."""
        try:
            if self.db.in_transaction():
                async with self.db.begin_nested():
                    yield
            else:
                async with self.db.begin():
                    yield
        except STORE_FAILURES as e:
            logger.error("song_store_transaction_failed", error=str(e))
            raise StoreUnavailableError("Song store transaction failed") from e

    async def list_songs(self, limit: int, order_by_rating_desc: bool = True) -> list[Song]:
        query = select(Song)
        if order_by_rating_desc:
            query = query.order_by(Song.rating.desc(), Song.id.asc())
        else:
            query = query.order_by(Song.title.asc(), Song.id.asc())
        result = await self._execute(query.limit(limit))
        return list(result.scalars().all())

    async def count_songs(self) -> int:
        result = await self._execute(select(func.count(Song.id)))
        return result.scalar_one()

    async def get_song(self, song_id: int, for_update: bool = False) -> Song | None:
        query = select(Song).where(Song.id == song_id)
        if for_update:
            query = query.with_for_update()
        result = await self._execute(query)
        return result.scalar_one_or_none()

    async def find_song(self, artist: str, title: str) -> Song | None:
        result = await self._execute(
            select(Song).where(Song.artist == artist, Song.title == title)
        )
        return result.scalar_one_or_none()

    async def add_song(self, song: Song) -> Song:
        self.db.add(song)
        await self.db.flush()
        await self.db.refresh(song)
        return song

    async def delete_song(self, song_id: int) -> bool:
        result = await self._execute(delete(Song).where(Song.id == song_id))
        return result.rowcount > 0

    async def update_ratings(
        self, song_a_id: int, new_rating_a: float, song_b_id: int, new_rating_b: float,
    ) -> None:
        for song_id, rating in ((song_a_id, new_rating_a), (song_b_id, new_rating_b)):
            await self._execute(
                update(Song)
                .where(Song.id == song_id)
                .values(rating=rating)
            )

    async def reset_ratings(self, rating: float) -> int:
        result = await self._execute(update(Song).values(rating=rating))
        return result.rowcount

    async def insert_vote_record(
        self, song_a_id: int, song_b_id: int, winner_id: int | None, voter_id: str | None = None,
    ) -> BattleVote:
        vote = BattleVote(
            song_a_id=song_a_id,
            song_b_id=song_b_id,
            winner_id=winner_id,
            voter_id=voter_id,
        )
        self.db.add(vote)
        await self.db.flush()
        return vote

    async def list_votes(self, limit: int) -> list[BattleVote]:
        result = await self._execute(
            select(BattleVote).order_by(BattleVote.created_at.desc(), BattleVote.id.desc()).limit(limit)
        )
        return list(result.scalars().all())

    async def recent_votes(self, voter_id: str, since: datetime) -> list[BattleVote]:
        result = await self._execute(
            select(BattleVote).where(
                BattleVote.voter_id == voter_id,
                BattleVote.created_at >= since,
            )
        )
        return list(result.scalars().all())

    async def _execute(self, statement):  # type: ignore[no-untyped-def]
        try:
            return await self.db.execute(statement)
        except STORE_FAILURES as e:
            logger.error("song_store_query_failed", error=str(e))
            raise StoreUnavailableError("Song store unavailable") from e
