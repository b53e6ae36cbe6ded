"""Tests for rating-vs-rank alignment and projected win deltas."""

import pytest

from ladder.rating.alignment import RankAlignment, project_win_delta, rating_gap


class TestRatingGap:
    def test_underranked(self, gold_one_half):
        gap = rating_gap(1850.0, gold_one_half)
        assert gap.difference == pytest.approx(100.0)
        assert gap.status is RankAlignment.UNDERRANKED

    def test_aligned_within_tolerance(self, gold_one_half):
        assert rating_gap(1800.0, gold_one_half).status is RankAlignment.ALIGNED
        assert rating_gap(1700.0, gold_one_half).status is RankAlignment.ALIGNED

    def test_overranked(self, gold_one_half):
        gap = rating_gap(1650.0, gold_one_half)
        assert gap.difference == pytest.approx(-100.0)
        assert gap.status is RankAlignment.OVERRANKED

    def test_custom_tolerance(self, gold_one_half):
        assert rating_gap(1790.0, gold_one_half, tolerance=20).status is RankAlignment.UNDERRANKED


class TestProjectWinDelta:
    @pytest.mark.parametrize(
        "rating, expected",
        [
            (1851.0, 20),  # strongly underranked
            (1850.0, 17),
            (1750.0, 15),
            (1690.0, 13),
            (1600.0, 11),  # strongly overranked
        ],
    )
    def test_bands(self, gold_one_half, rating, expected):
        assert project_win_delta(rating, gold_one_half) == expected
