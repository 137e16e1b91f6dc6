"""Map raw ratings onto the 0-5 star scale shown in the UI."""

from __future__ import annotations

MAX_STARS = 5.0
DEFAULT_MIN_RATING = 1000.0
DEFAULT_MAX_RATING = 1600.0


def rating_to_stars(
    rating: float,
    min_rating: float = DEFAULT_MIN_RATING,
    max_rating: float = DEFAULT_MAX_RATING,
) -> float:
    """Clamp ``rating`` into the window, rescale to [0, 5], round to 0.1.

    >>> rating_to_stars(1500)
    4.2
    """
    if max_rating <= min_rating:
        raise ValueError(f"max_rating ({max_rating}) must exceed min_rating ({min_rating})")

    clamped = min(max(rating, min_rating), max_rating)
    ratio = (clamped - min_rating) / (max_rating - min_rating)
    return round(ratio * MAX_STARS, 1)
