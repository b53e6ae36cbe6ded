"""Rank ladder rating estimation, counter prediction and progression simulation."""

from __future__ import annotations

# Main API
from ladder.analysis import ConfidenceReport, ConfidenceScorer, score_confidence
from ladder.core import (
    BASELINE_RATINGS,
    BASELINE_TABLE_VERSION,
    EngineConfig,
    RankPosition,
    Tier,
    advance_one_step,
    carry_lifetime_delta,
    from_total_points,
    interpolated_rating,
    load_engine_config,
    parse_rank,
    reconstruct_lifetime_delta,
    to_total_points,
)
from ladder.prediction import (
    CounterPredictor,
    PredictionResult,
    SymmetryCheck,
    check_symmetry,
    predict_counter_delta,
)
from ladder.rating import (
    MatchRecord,
    Outcome,
    RatingEstimator,
    RatingState,
    estimate_rating,
)
from ladder.simulation import (
    ProgressionSimulator,
    SimulationResult,
    simulate_progression,
)

__version__ = "0.1.0"

__all__ = [
    # Pure entry points
    "estimate_rating",
    "predict_counter_delta",
    "simulate_progression",
    "score_confidence",
    "check_symmetry",
    # Engines
    "RatingEstimator",
    "CounterPredictor",
    "ProgressionSimulator",
    "ConfidenceScorer",
    # Value types
    "Tier",
    "RankPosition",
    "Outcome",
    "MatchRecord",
    "RatingState",
    "PredictionResult",
    "SymmetryCheck",
    "SimulationResult",
    "ConfidenceReport",
    # Ladder helpers
    "parse_rank",
    "interpolated_rating",
    "advance_one_step",
    "carry_lifetime_delta",
    "reconstruct_lifetime_delta",
    "from_total_points",
    "to_total_points",
    # Configuration
    "EngineConfig",
    "load_engine_config",
    "BASELINE_RATINGS",
    "BASELINE_TABLE_VERSION",
    # Version
    "__version__",
]

# For advanced functionality, import directly from submodules:
# - ladder.core: rank codec, ladder arithmetic, logging and config
# - ladder.rating: match history loading, shield status, rank alignment
# - ladder.analysis: roster statistics
