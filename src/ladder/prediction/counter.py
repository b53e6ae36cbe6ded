"""
Counter-delta prediction from a single observed match.

Given one observed (outcome, point delta) pair and the player's rating, the
point delta is inverted through the logistic expected-score model to recover
the implied opponent rating, which then predicts the delta the *opposite*
outcome would have produced.

When the inversion leaves the open interval (0, 1) the result is
indeterminate. That is an expected outcome reported as ``None``, not an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ladder.core.config import PredictorConfig
from ladder.core.logging import get_logger
from ladder.core.transforms import expected_score, round_half_up

logger = get_logger(__name__)

LOSS_MISMATCH = "loss-mismatch"
WIN_MISMATCH = "win-mismatch"


def _validate_outcome_score(score: float) -> float:
    if score not in (0, 1):
        raise ValueError(f"Observed outcome score must be 0 or 1, got {score!r}")
    return float(score)


def _validate_k(k: float) -> float:
    if not k > 0:
        raise ValueError(f"K-factor must be positive, got {k!r}")
    return float(k)


@dataclass(frozen=True)
class PredictionResult:
    implied_opponent_rating: float | None
    predicted_delta: int | None

    @property
    def is_indeterminate(self) -> bool:
        return self.predicted_delta is None


@dataclass(frozen=True)
class SymmetryCheck:
    """Win/loss predictions derived from each other, with mismatch warnings."""

    predicted_loss: int | None
    predicted_win: int | None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def warning(self) -> str | None:
        return self.warnings[0] if self.warnings else None

    @property
    def consistent(self) -> bool:
        return not self.warnings


class CounterPredictor:
    """Infer opponent strength and opposite-outcome deltas."""

    def __init__(self, config: PredictorConfig | None = None):
        self.config = config or PredictorConfig()

    def implied_opponent_rating(
        self,
        player_rating: float,
        observed_delta: float,
        observed_outcome_score: float,
        k: float | None = None,
    ) -> float | None:
        """
        Opponent rating consistent with an observed delta, or None.

        ``expected = outcome - delta / k``; the opponent rating is
        ``player + scale * log10(1 / expected - 1)``.
        """
        k = _validate_k(self.config.k_factor if k is None else k)
        score = _validate_outcome_score(observed_outcome_score)
        expected = score - observed_delta / k
        if expected <= 0 or expected >= 1:
            logger.info(
                "indeterminate opponent rating: delta=%s outcome=%s k=%s gives expected=%.4f",
                observed_delta,
                score,
                k,
                expected,
            )
            return None
        return player_rating + self.config.logistic_scale * math.log10(
            1 / expected - 1
        )

    def predict(
        self,
        known_delta: float,
        known_outcome_score: float,
        player_rating: float,
        k: float | None = None,
    ) -> PredictionResult:
        k = _validate_k(self.config.k_factor if k is None else k)
        opponent = self.implied_opponent_rating(
            player_rating, known_delta, known_outcome_score, k
        )
        if opponent is None:
            return PredictionResult(None, None)

        expected = expected_score(
            player_rating, opponent, scale=self.config.logistic_scale
        )
        opposite = 1.0 - _validate_outcome_score(known_outcome_score)
        return PredictionResult(
            implied_opponent_rating=opponent,
            predicted_delta=round_half_up((opposite - expected) * k),
        )

    def predict_counter_delta(
        self,
        known_delta: float,
        known_outcome_score: float,
        player_rating: float,
        k: float | None = None,
    ) -> int | None:
        """Delta the opposite outcome would have produced, or None."""
        return self.predict(
            known_delta, known_outcome_score, player_rating, k
        ).predicted_delta

    def check_symmetry(
        self,
        win_delta: float,
        loss_delta: float,
        player_rating: float,
        k: float | None = None,
    ) -> SymmetryCheck:
        """
        Predict the loss from the win and the win from the loss.

        A prediction further than the tolerance from its observed counterpart
        attaches a warning. Indeterminate predictions cannot be compared and
        attach none.
        """
        predicted_loss = self.predict_counter_delta(win_delta, 1, player_rating, k)
        predicted_win = self.predict_counter_delta(loss_delta, 0, player_rating, k)
        tolerance = self.config.symmetry_tolerance

        warnings = []
        if predicted_loss is not None and abs(predicted_loss - loss_delta) > tolerance:
            warnings.append(LOSS_MISMATCH)
        if predicted_win is not None and abs(predicted_win - win_delta) > tolerance:
            warnings.append(WIN_MISMATCH)
        if warnings:
            logger.warning(
                "symmetry check failed (%s): win=%s loss=%s predicted_win=%s predicted_loss=%s",
                ", ".join(warnings),
                win_delta,
                loss_delta,
                predicted_win,
                predicted_loss,
            )
        return SymmetryCheck(predicted_loss, predicted_win, tuple(warnings))


def implied_opponent_rating(
    player_rating: float,
    observed_delta: float,
    observed_outcome_score: float,
    k: float | None = None,
) -> float | None:
    return CounterPredictor().implied_opponent_rating(
        player_rating, observed_delta, observed_outcome_score, k
    )


def predict_counter_delta(
    known_delta: float,
    known_outcome_score: float,
    player_rating: float,
    k: float | None = None,
    config: PredictorConfig | None = None,
) -> int | None:
    return CounterPredictor(config).predict_counter_delta(
        known_delta, known_outcome_score, player_rating, k
    )


def check_symmetry(
    win_delta: float,
    loss_delta: float,
    player_rating: float,
    k: float | None = None,
    config: PredictorConfig | None = None,
) -> SymmetryCheck:
    return CounterPredictor(config).check_symmetry(
        win_delta, loss_delta, player_rating, k
    )
