"""Tests for the Elo rating math."""

import pytest

from app.rating.elo import EloResult, expected_score, k_factor, new_rating, update_ratings


class TestExpectedScore:
    def test_equal_ratings_gives_half(self):
        assert expected_score(1500, 1500) == 0.5

    def test_higher_rating_expects_more(self):
        assert expected_score(1600, 1400) > 0.5

    def test_lower_rating_expects_less(self):
        assert expected_score(1400, 1600) < 0.5

    @pytest.mark.parametrize(
        ("a", "b"),
        [(1500, 1500), (1600, 1400), (2200, 1800), (900, 2700), (1500.5, 1499.25)],
    )
    def test_symmetric(self, a, b):
        assert expected_score(a, b) + expected_score(b, a) == pytest.approx(1.0)

    def test_four_hundred_point_gap(self):
        assert expected_score(1800, 2200) == pytest.approx(1 / 11)


class TestKFactor:
    @pytest.mark.parametrize(
        ("rating", "expected"),
        [
            (0, 32),
            (1500, 32),
            (2099.99, 32),
            (2100, 24),
            (2399.99, 24),
            (2400, 16),
            (3000, 16),
        ],
    )
    def test_tiers(self, rating, expected):
        assert k_factor(rating) == expected


class TestNewRating:
    def test_win_at_even_odds(self):
        assert new_rating(1500, 0.5, 1.0, 32) == 1516

    def test_loss_at_even_odds(self):
        assert new_rating(1500, 0.5, 0.0, 32) == 1484


class TestUpdateRatings:
    def test_even_battle(self):
        result = update_ratings(1500, 1500)
        assert result.winner_new_rating == 1516
        assert result.loser_new_rating == 1484
        assert result.winner_expected == 0.5
        assert result.winner_k_factor == result.loser_k_factor == 32

    def test_underdog_win_uses_each_sides_k_factor(self):
        # 1800 (K=32) beats 2200 (K=24)
        result = update_ratings(1800, 2200)
        assert result.winner_k_factor == 32
        assert result.loser_k_factor == 24
        assert result.winner_new_rating == pytest.approx(1829.09, abs=0.01)
        assert result.loser_new_rating == pytest.approx(2178.18, abs=0.01)

    def test_no_rounding_applied(self):
        result = update_ratings(1800, 2200)
        assert result.winner_new_rating != round(result.winner_new_rating, 2)

    def test_winner_gains_loser_loses(self):
        for winner, loser in [(1500, 1500), (2500, 1000), (1000, 2500)]:
            result = update_ratings(winner, loser)
            assert result.winner_new_rating >= winner
            assert result.loser_new_rating <= loser

    def test_upset_gives_larger_delta(self):
        """Weaker song beating a stronger one moves further."""
        normal = update_ratings(1600, 1400)
        upset = update_ratings(1400, 1600)
        assert upset.winner_delta > normal.winner_delta

    def test_deltas_match_new_ratings(self):
        result = update_ratings(2150, 1980)
        assert result.winner_new_rating == pytest.approx(2150 + result.winner_delta)
        assert result.loser_new_rating == pytest.approx(1980 + result.loser_delta)

    def test_returns_elo_result(self):
        assert isinstance(update_ratings(1500, 1500), EloResult)
