"""Match history, rating estimation and rank alignment."""

from ladder.rating.alignment import (
    RankAlignment,
    RatingGap,
    project_win_delta,
    rating_gap,
)
from ladder.rating.estimator import RatingEstimator, RatingState, estimate_rating
from ladder.rating.history import (
    MatchRecord,
    Outcome,
    ShieldStatus,
    match_from_record,
    matches_from_dataframe,
    matches_from_records,
    matches_to_dataframe,
    shield_status,
)

__all__ = [
    "Outcome",
    "MatchRecord",
    "ShieldStatus",
    "match_from_record",
    "matches_from_records",
    "matches_from_dataframe",
    "matches_to_dataframe",
    "shield_status",
    "RatingState",
    "RatingEstimator",
    "estimate_rating",
    "RankAlignment",
    "RatingGap",
    "rating_gap",
    "project_win_delta",
]
