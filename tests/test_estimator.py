"""Tests for the match-by-match rating estimator."""

import logging

import pytest

from ladder.core.config import EstimatorConfig
from ladder.core.transforms import difficulty_multiplier
from ladder.rating.estimator import RatingEstimator, RatingState, estimate_rating
from ladder.rating.history import MatchRecord, Outcome


class TestInitialize:
    def setup_method(self):
        self.estimator = RatingEstimator()

    def test_established_without_prior(self, gold_one_half):
        state = self.estimator.initialize(gold_one_half)
        assert state == RatingState(1750.0, 1.8, 0.08)

    def test_new_season_without_prior(self, gold_one_half):
        state = self.estimator.initialize(gold_one_half, is_new_season=True)
        assert state.rating == pytest.approx(1750.0)
        assert state.deviation == pytest.approx(2.5)
        assert state.volatility == pytest.approx(0.08)

    def test_prior_rating_lowers_volatility(self, gold_one_half):
        state = self.estimator.initialize(gold_one_half, previous_rating=1900.0)
        assert state.rating == pytest.approx(1750.0)
        assert state.deviation == pytest.approx(1.8)
        assert state.volatility == pytest.approx(0.06)

    def test_new_season_blends_prior(self, gold_one_half):
        state = self.estimator.initialize(
            gold_one_half, is_new_season=True, previous_rating=1850.0
        )
        assert state.rating == pytest.approx(1800.0)
        assert state.deviation == pytest.approx(2.2)
        assert state.volatility == pytest.approx(0.06)


class TestFold:
    def setup_method(self):
        self.estimator = RatingEstimator()
        self.state = RatingState(1750.0, 1.8, 0.08)

    def test_worked_win_example(self):
        match = MatchRecord(Outcome.WIN, 20)
        assert self.estimator.expected_delta(1750.0, Outcome.WIN) == 15
        assert self.estimator.surprise(self.state, match) == pytest.approx(0.25)

        state = self.estimator.fold(self.state, match)
        assert state.rating == pytest.approx(1766.0)
        assert state.deviation == pytest.approx(1.775)
        assert state.volatility == pytest.approx(0.08125)

    def test_shielded_loss_uses_internal_penalty(self):
        state = self.estimator.fold(self.state, MatchRecord(Outcome.LOSS, 0, shielded=True))
        assert state.rating == pytest.approx(1740.4)
        assert state.deviation == pytest.approx(1.75)
        assert state.volatility == pytest.approx(0.08)

    def test_small_win_has_minimum_gain(self):
        state = self.estimator.fold(self.state, MatchRecord(Outcome.WIN, 3))
        assert state.rating == pytest.approx(1755.0)

    def test_small_loss_has_minimum_drop(self):
        state = self.estimator.fold(self.state, MatchRecord(Outcome.LOSS, -2))
        assert state.rating == pytest.approx(1745.0)

    def test_draw(self):
        state = self.estimator.fold(self.state, MatchRecord(Outcome.DRAW, 2))
        assert state.rating == pytest.approx(1751.0)

    def test_difficulty_scales_expected_delta(self):
        assert self.estimator.expected_delta(900.0, Outcome.WIN) == 30
        assert self.estimator.expected_delta(3600.0, Outcome.LOSS) == -6
        assert self.estimator.expected_delta(0.0, Outcome.WIN) == 30

    def test_fold_does_not_mutate(self):
        before = self.state
        self.estimator.fold(self.state, MatchRecord(Outcome.WIN, 20))
        assert self.state == before

    def test_floors_hold(self):
        state = self.state
        for _ in range(100):
            state = self.estimator.fold(state, MatchRecord(Outcome.WIN, 15))
        assert state.deviation >= 0.8
        assert state.volatility >= 0.04
        assert state.deviation == pytest.approx(0.8)

    def test_fold_logs_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="ladder")
        self.estimator.fold(self.state, MatchRecord(Outcome.WIN, 20))
        assert any("surprise=0.250" in m for m in caplog.messages)


class TestEstimate:
    def test_no_matches_equals_initial_state(self, gold_one_half):
        assert estimate_rating(gold_one_half) == RatingEstimator().initialize(gold_one_half)

    def test_trajectory_length(self, gold_one_half, steady_matches):
        states = RatingEstimator().trajectory(gold_one_half, steady_matches)
        assert len(states) == len(steady_matches) + 1
        assert states[-1] == estimate_rating(gold_one_half, steady_matches)

    def test_custom_config(self, gold_one_half):
        config = EstimatorConfig(win_factor=1.0)
        state = estimate_rating(gold_one_half, [MatchRecord(Outcome.WIN, 20)], config=config)
        assert state.rating == pytest.approx(1770.0)

    def test_rounded(self):
        state = RatingState(1766.4, 1.77512, 0.081254).rounded()
        assert state == RatingState(1766.0, 1.78, 0.081)


class TestDifficultyMultiplier:
    @pytest.mark.parametrize(
        "rating, expected",
        [(1800.0, 1.0), (1200.0, 1.5), (600.0, 2.0), (7200.0, 0.5), (0.0, 2.0), (-100.0, 0.5)],
    )
    def test_clamped_ratio(self, rating, expected):
        assert difficulty_multiplier(rating) == pytest.approx(expected)
