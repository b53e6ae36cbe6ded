"""
Running skill-rating estimate from a rank position and match history.

The estimate is Glicko-inspired: a rating on the baseline-table scale plus a
deviation (uncertainty) and a volatility (rate of change). Each match moves
the rating by a fraction of its point delta and widens or narrows the
uncertainty according to how surprising the delta was for the current rating.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ladder.core.config import EstimatorConfig
from ladder.core.ladder import position_rating
from ladder.core.logging import get_logger
from ladder.core.tiers import RankPosition
from ladder.core.transforms import difficulty_multiplier, round_half_up
from ladder.rating.history import MatchRecord, Outcome

logger = get_logger(__name__)


@dataclass(frozen=True)
class RatingState:
    """Rating estimate with its uncertainty measures."""

    rating: float
    deviation: float
    volatility: float

    def rounded(self) -> RatingState:
        """Presentation rounding: whole rating, 2dp deviation, 3dp volatility."""
        return RatingState(
            rating=float(round_half_up(self.rating)),
            deviation=round(self.deviation, 2),
            volatility=round(self.volatility, 3),
        )


class RatingEstimator:
    """
    Fold match records into a rating estimate.

    The estimator holds only configuration; every method is a pure function
    of its arguments.
    """

    def __init__(self, config: EstimatorConfig | None = None):
        self.config = config or EstimatorConfig()

    def initialize(
        self,
        position: RankPosition,
        is_new_season: bool = False,
        previous_rating: float | None = None,
    ) -> RatingState:
        """
        Create the starting state from a rank position.

        The rating is the interpolated rating of the position. A known
        previous-season rating lowers the starting volatility, and at the
        start of a new season it is averaged with the position's rating.
        """
        cfg = self.config
        rating = position_rating(position)
        deviation = (
            cfg.deviation_new_season if is_new_season else cfg.deviation_established
        )
        volatility = (
            cfg.volatility_with_prior
            if previous_rating is not None
            else cfg.volatility_without_prior
        )

        if is_new_season and previous_rating is not None:
            rating = (previous_rating + rating) / 2
            deviation = cfg.deviation_blended_season

        return RatingState(
            rating=float(rating), deviation=deviation, volatility=volatility
        )

    def expected_delta(self, rating: float, outcome: Outcome) -> int:
        """Point delta a player at ``rating`` would typically see for ``outcome``."""
        cfg = self.config
        base = {
            Outcome.WIN: cfg.base_win_delta,
            Outcome.LOSS: cfg.base_loss_delta,
            Outcome.DRAW: cfg.base_draw_delta,
        }[outcome]
        multiplier = difficulty_multiplier(
            rating,
            reference=cfg.difficulty_reference,
            lower=cfg.min_difficulty,
            upper=cfg.max_difficulty,
        )
        return round_half_up(base * multiplier)

    def surprise(self, state: RatingState, match: MatchRecord) -> float:
        effective = self._effective_delta(match)
        expected = self.expected_delta(state.rating, match.outcome)
        return abs(effective - expected) / self.config.surprise_scale

    def _effective_delta(self, match: MatchRecord) -> int:
        if match.shielded:
            return self.config.shielded_loss_delta
        return match.point_delta

    def fold(self, state: RatingState, match: MatchRecord) -> RatingState:
        """Return the state after one more match."""
        cfg = self.config
        surprise = self.surprise(state, match)

        if match.outcome is Outcome.WIN:
            step = max(cfg.min_win_gain, match.point_delta * cfg.win_factor)
        elif match.outcome is Outcome.LOSS:
            step = min(
                cfg.min_loss_drop, self._effective_delta(match) * cfg.loss_factor
            )
        else:
            step = match.point_delta * cfg.draw_factor

        new_state = RatingState(
            rating=state.rating + step,
            deviation=max(
                cfg.min_deviation,
                state.deviation
                - cfg.deviation_decay
                + surprise * cfg.deviation_surprise_weight,
            ),
            volatility=max(
                cfg.min_volatility,
                state.volatility + surprise * cfg.volatility_surprise_weight,
            ),
        )
        logger.debug(
            "fold %s delta=%d surprise=%.3f rating %.1f -> %.1f",
            match.outcome.value,
            match.point_delta,
            surprise,
            state.rating,
            new_state.rating,
        )
        return new_state

    def trajectory(
        self,
        position: RankPosition,
        matches: Sequence[MatchRecord],
        is_new_season: bool = False,
        previous_rating: float | None = None,
    ) -> list[RatingState]:
        """Initial state followed by the state after each match."""
        state = self.initialize(position, is_new_season, previous_rating)
        states = [state]
        for match in matches:
            state = self.fold(state, match)
            states.append(state)
        return states

    def estimate(
        self,
        position: RankPosition,
        matches: Sequence[MatchRecord],
        is_new_season: bool = False,
        previous_rating: float | None = None,
    ) -> RatingState:
        final = self.trajectory(position, matches, is_new_season, previous_rating)[-1]
        logger.debug(
            "estimated %s over %d matches: rating=%.1f deviation=%.3f",
            position.display_name,
            len(matches),
            final.rating,
            final.deviation,
        )
        return final


def estimate_rating(
    position: RankPosition,
    matches: Sequence[MatchRecord] = (),
    is_new_season: bool = False,
    previous_rating: float | None = None,
    config: EstimatorConfig | None = None,
) -> RatingState:
    """Estimate a player's rating from their rank and match history."""
    return RatingEstimator(config).estimate(
        position, matches, is_new_season, previous_rating
    )
