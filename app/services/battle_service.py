"""Battle orchestration: serve the next matchup and record its outcome.

Bridges the HTTP layer and the rating engine: reads songs through the
``SongStore``, runs the pure pairing/Elo functions, and writes results back
inside a single store transaction.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import structlog

from app.config import Settings, settings as default_settings
from app.core.exceptions import SongNotFoundError, ValidationError
from app.models.song import Song
from app.rating.elo import EloResult, update_ratings
from app.rating.pairing import PairKey, Pairing, pair_key, select_pairing
from app.stores.song_store import SongStore

logger = structlog.get_logger()


@dataclass
class MatchOutcome:
    """What was recorded for one submitted battle."""

    vote_id: int
    skipped: bool
    elo: EloResult | None = None


@dataclass
class VoterHistory:
    """Recent activity of one voter, used to steer pairing away from repeats."""

    skipped_song_ids: set[int]
    recent_pairs: set[PairKey]


class BattleService:
    """Pairing selection and rating updates against a ``SongStore``."""

    def __init__(
        self,
        store: SongStore,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.settings = settings or default_settings
        self.rng = rng

    async def next_pairing(self, voter_id: str | None = None) -> Pairing[Song] | None:
        """Pick the next matchup, or None when fewer than two songs are eligible."""
        songs = await self.store.list_songs(
            limit=self.settings.pairing_pool_size,
            order_by_rating_desc=True,
        )

        history = await self._load_voter_history(voter_id) if voter_id else None
        pairing = select_pairing(
            songs,
            rng=self.rng,
            excluded_ids=history.skipped_song_ids if history else (),
            recent_pairs=history.recent_pairs if history else (),
        )

        if pairing is None:
            logger.info("no_pairing_available", pool_size=len(songs), voter_id=voter_id)
            return None

        logger.info(
            "pairing_selected",
            song_a_id=pairing.song_a.id,
            song_b_id=pairing.song_b.id,
            rating_gap=round(pairing.rating_gap, 2),
            pool_size=len(songs),
        )
        return pairing

    async def submit_result(
        self,
        winner_id: int,
        loser_id: int,
        skipped: bool = False,
        voter_id: str | None = None,
    ) -> MatchOutcome:
        """Record a battle outcome.

        1. Lock both songs (ascending id order) inside one transaction
        2. Fail with SongNotFoundError before any write if either is missing
        3. Skip: write a vote with no winner, leave ratings alone
        4. Otherwise: apply the Elo update to both songs and write the vote

        Everything from step 1 on commits together or not at all.
        """
        if winner_id == loser_id:
            raise ValidationError("A song cannot battle itself")

        async with self.store.atomic():
            songs: dict[int, Song] = {}
            for song_id in sorted((winner_id, loser_id)):
                song = await self.store.get_song(song_id, for_update=True)
                if song is None:
                    raise SongNotFoundError(song_id)
                songs[song_id] = song

            if skipped:
                vote = await self.store.insert_vote_record(
                    winner_id, loser_id, None, voter_id=voter_id,
                )
                logger.info(
                    "battle_skip_recorded",
                    vote_id=vote.id,
                    song_a_id=winner_id,
                    song_b_id=loser_id,
                )
                return MatchOutcome(vote_id=vote.id, skipped=True)

            winner, loser = songs[winner_id], songs[loser_id]
            elo = update_ratings(winner.rating, loser.rating)
            await self.store.update_ratings(
                winner.id, elo.winner_new_rating, loser.id, elo.loser_new_rating,
            )
            vote = await self.store.insert_vote_record(
                winner.id, loser.id, winner.id, voter_id=voter_id,
            )

        logger.info(
            "battle_vote_recorded",
            vote_id=vote.id,
            winner_id=winner_id,
            loser_id=loser_id,
            winner_delta=round(elo.winner_delta, 2),
            loser_delta=round(elo.loser_delta, 2),
        )
        return MatchOutcome(vote_id=vote.id, skipped=False, elo=elo)

    async def reset_ratings(self) -> int:
        """Put every song back at the default rating. Vote history is kept."""
        async with self.store.atomic():
            count = await self.store.reset_ratings(self.settings.default_rating)
        logger.info("ratings_reset", count=count, rating=self.settings.default_rating)
        return count

    async def _load_voter_history(self, voter_id: str) -> VoterHistory:
        now = datetime.now(timezone.utc)
        pair_cutoff = now - timedelta(days=self.settings.pairing_cooldown_days)
        skip_cutoff = now - timedelta(hours=self.settings.skip_cooldown_hours)

        skipped: set[int] = set()
        recent: set[PairKey] = set()
        for vote in await self.store.recent_votes(voter_id, since=min(pair_cutoff, skip_cutoff)):
            if vote.created_at >= pair_cutoff:
                recent.add(pair_key(vote.song_a_id, vote.song_b_id))
            if vote.winner_id is None and vote.created_at >= skip_cutoff:
                skipped.update((vote.song_a_id, vote.song_b_id))

        return VoterHistory(skipped_song_ids=skipped, recent_pairs=recent)
