"""Elo rating math for head-to-head song battles.

Pure math, no I/O. Standard logistic Elo with a rating-tiered K-factor:
highly rated songs move less per battle than songs still finding their level.
"""

from __future__ import annotations

from dataclasses import dataclass

# (exclusive upper bound, K); anything at or above the last bound gets FLOOR_K_FACTOR
K_FACTOR_TIERS: tuple[tuple[float, float], ...] = (
    (2100.0, 32.0),
    (2400.0, 24.0),
)
FLOOR_K_FACTOR = 16.0


@dataclass(frozen=True)
class EloResult:
    """Result of an Elo update for both sides of a decided battle."""

    winner_new_rating: float
    loser_new_rating: float
    winner_delta: float
    loser_delta: float
    winner_expected: float
    loser_expected: float
    winner_k_factor: float
    loser_k_factor: float


def expected_score(rating_a: float, rating_b: float) -> float:
    """Compute expected score of song A vs song B.

    Returns a value in (0, 1) representing the probability A wins.
    """
    return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / 400.0))


def k_factor(rating: float) -> float:
    """Maximum rating swing for a song at ``rating``."""
    for upper_bound, k in K_FACTOR_TIERS:
        if rating < upper_bound:
            return k
    return FLOOR_K_FACTOR


def new_rating(old_rating: float, expected: float, actual: float, k: float) -> float:
    return old_rating + k * (actual - expected)


def update_ratings(winner_rating: float, loser_rating: float) -> EloResult:
    """Compute new Elo ratings after a decided battle.

    Each side uses the K-factor of its own pre-battle rating. Nothing is
    rounded; display rounding belongs to the presentation layer.
    """
    exp_winner = expected_score(winner_rating, loser_rating)
    exp_loser = expected_score(loser_rating, winner_rating)

    k_winner = k_factor(winner_rating)
    k_loser = k_factor(loser_rating)

    winner_new = new_rating(winner_rating, exp_winner, 1.0, k_winner)
    loser_new = new_rating(loser_rating, exp_loser, 0.0, k_loser)

    return EloResult(
        winner_new_rating=winner_new,
        loser_new_rating=loser_new,
        winner_delta=winner_new - winner_rating,
        loser_delta=loser_new - loser_rating,
        winner_expected=exp_winner,
        loser_expected=exp_loser,
        winner_k_factor=k_winner,
        loser_k_factor=k_loser,
    )
