"""Counter-delta prediction."""

from ladder.prediction.counter import (
    LOSS_MISMATCH,
    WIN_MISMATCH,
    CounterPredictor,
    PredictionResult,
    SymmetryCheck,
    check_symmetry,
    implied_opponent_rating,
    predict_counter_delta,
)

__all__ = [
    "CounterPredictor",
    "PredictionResult",
    "SymmetryCheck",
    "implied_opponent_rating",
    "predict_counter_delta",
    "check_symmetry",
    "LOSS_MISMATCH",
    "WIN_MISMATCH",
]
