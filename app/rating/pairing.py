"""Pairing selection: pick the next two songs to put in front of a voter.

A random pivot is drawn from the candidate pool and matched against the
song whose rating is numerically closest to it, so votes land between
songs of similar strength and carry the most information. Pure: reads
only what it is given and never touches ratings.
"""

from __future__ import annotations

import random
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar


class RatedSong(Protocol):
    id: int
    rating: float


SongT = TypeVar("SongT", bound=RatedSong)

PairKey = tuple[int, int]


@dataclass(frozen=True)
class Pairing(Generic[SongT]):
    """One matchup. ``song_a`` is the pivot, ``song_b`` its nearest-rated opponent."""

    song_a: SongT
    song_b: SongT

    @property
    def rating_gap(self) -> float:
        return abs(self.song_a.rating - self.song_b.rating)


def pair_key(song_a_id: int, song_b_id: int) -> PairKey:
    """Order-independent key for a pair of song ids."""
    return (song_a_id, song_b_id) if song_a_id < song_b_id else (song_b_id, song_a_id)


def select_pairing(
    songs: Sequence[SongT],
    *,
    rng: random.Random | None = None,
    excluded_ids: Collection[int] = (),
    recent_pairs: Collection[PairKey] = (),
) -> Pairing[SongT] | None:
    """Select a pivot-and-nearest-neighbour pairing from ``songs``.

    Args:
        songs: Candidate pool, usually the top-N songs by rating.
        rng: Source of randomness for the pivot draw (module ``random`` if None).
        excluded_ids: Songs that must not appear at all (e.g. recently skipped).
        recent_pairs: ``pair_key`` values to avoid repeating. Ignored when
            every possible opponent of the pivot is in it.

    Returns:
        A ``Pairing`` of two distinct songs, or None when fewer than two
        eligible songs remain. None is a normal outcome, not an error.
    """
    chooser = rng if rng is not None else random

    candidates = [s for s in songs if s.id not in excluded_ids]
    if len(candidates) < 2:
        return None

    pivot = chooser.choice(candidates)
    opponents = [s for s in candidates if s.id != pivot.id]
    if not opponents:
        return None

    if recent_pairs:
        fresh = [s for s in opponents if pair_key(pivot.id, s.id) not in recent_pairs]
        if fresh:
            opponents = fresh

    # min() keeps the first of equally close opponents
    opponent = min(opponents, key=lambda s: abs(s.rating - pivot.rating))
    return Pairing(song_a=pivot, song_b=opponent)
