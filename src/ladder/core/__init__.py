"""Core components: ladder tables, rank arithmetic and shared transforms."""

from ladder.core.config import (
    ConfidenceConfig,
    EngineConfig,
    EstimatorConfig,
    PredictorConfig,
    SimulationConfig,
    engine_config_from_dict,
    load_engine_config,
)
from ladder.core.constants import BASELINE_RATINGS, BASELINE_TABLE_VERSION
from ladder.core.ladder import (
    AdvanceResult,
    LifetimeCarry,
    advance,
    advance_one_step,
    carry_lifetime_delta,
    interpolated_rating,
    position_rating,
    reconstruct_lifetime_delta,
    tier_baseline,
)
from ladder.core.logging import get_logger, log_timing, setup_logging
from ladder.core.tiers import (
    LADDER,
    RankPosition,
    Tier,
    from_total_points,
    is_valid_total_points,
    ladder_index,
    next_rank,
    parse_rank,
    points_to_next_rank,
    rank_change_description,
    rung,
    to_total_points,
)
from ladder.core.transforms import (
    clamp,
    difficulty_multiplier,
    expected_score,
    round_half_up,
)

__all__ = [
    # Configuration
    "EngineConfig",
    "EstimatorConfig",
    "PredictorConfig",
    "SimulationConfig",
    "ConfidenceConfig",
    "engine_config_from_dict",
    "load_engine_config",
    # Ladder tables
    "BASELINE_RATINGS",
    "BASELINE_TABLE_VERSION",
    "LADDER",
    "Tier",
    "RankPosition",
    # Rank codec
    "ladder_index",
    "rung",
    "parse_rank",
    "from_total_points",
    "to_total_points",
    "is_valid_total_points",
    "next_rank",
    "points_to_next_rank",
    "rank_change_description",
    # Ladder arithmetic
    "AdvanceResult",
    "LifetimeCarry",
    "advance",
    "advance_one_step",
    "carry_lifetime_delta",
    "reconstruct_lifetime_delta",
    "interpolated_rating",
    "position_rating",
    "tier_baseline",
    # Transforms
    "expected_score",
    "difficulty_multiplier",
    "round_half_up",
    "clamp",
    # Logging
    "setup_logging",
    "get_logger",
    "log_timing",
]
