"""Tests for the rating-to-stars display transform."""

import pytest

from app.rating.display import rating_to_stars


class TestRatingToStars:
    def test_default_window(self):
        assert rating_to_stars(1500) == 4.2

    def test_clamps_below_window(self):
        assert rating_to_stars(400) == 0.0

    def test_clamps_above_window(self):
        assert rating_to_stars(2400) == 5.0

    def test_window_edges(self):
        assert rating_to_stars(1000) == 0.0
        assert rating_to_stars(1600) == 5.0

    def test_custom_window(self):
        assert rating_to_stars(1500, min_rating=1000, max_rating=2000) == 2.5

    def test_rounds_to_one_decimal(self):
        stars = rating_to_stars(1234.5)
        assert stars == round(stars, 1)

    def test_empty_window_rejected(self):
        with pytest.raises(ValueError):
            rating_to_stars(1500, min_rating=1600, max_rating=1600)
