"""Confidence scoring and roster statistics."""

from ladder.analysis.confidence import (
    ConfidenceLabel,
    ConfidenceReport,
    ConfidenceScorer,
    score_confidence,
)
from ladder.analysis.statistics import (
    RankStatistics,
    rank_distribution,
    rank_statistics,
    rank_table,
)

__all__ = [
    "ConfidenceLabel",
    "ConfidenceReport",
    "ConfidenceScorer",
    "score_confidence",
    "RankStatistics",
    "rank_statistics",
    "rank_table",
    "rank_distribution",
]
