"""
Heuristic confidence scoring for rating predictions.

The score is an additive 0-100 heuristic over a match-history sample. It
rewards larger samples, consistent point deltas, a recent established season
and a plausible win rate, and labels the result Low, Medium or High.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

import numpy as np

from ladder.core.config import ConfidenceConfig
from ladder.core.logging import get_logger
from ladder.rating.history import MatchRecord

logger = get_logger(__name__)


class ConfidenceLabel(Enum):
    """Confidence band of a prediction."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class ConfidenceReport:
    score: int
    label: ConfidenceLabel
    components: dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.label.value} ({self.score}/100)"


class ConfidenceScorer:
    """
    Score how trustworthy a prediction from a match sample is.

    Point values come from ``ConfidenceConfig``; the defaults are shown.

    Components
    ----------
    sample_size
        40 for >= 8 matches, 30 for >= 5, 20 for >= 3, else 10.
    variance
        Variance of absolute shield-adjusted deltas: 30 below the low
        threshold, 20 below the medium threshold, else 10. An empty sample
        earns nothing.
    recency
        15 for an established season, 10 at the start of a new one.
    win_rate
        With at least 5 matches: 15 inside [0.4, 0.7], 10 inside [0.3, 0.8],
        else 5. Smaller samples get nothing.
    season_context
        Fixed penalty for the missing broader season context.
    shield
        Bonus when any match in the sample was shielded.

    Samples smaller than ``small_sample_size`` are capped at
    ``small_sample_cap`` so they always land in the Low band.
    """

    def __init__(self, config: ConfidenceConfig | None = None):
        self.config = config or ConfidenceConfig()

    def _sample_size_points(self, count: int) -> int:
        for minimum, points in self.config.sample_size_points:
            if count >= minimum:
                return points
        return self.config.sample_size_floor

    def _variance_points(self, matches: Sequence[MatchRecord]) -> int:
        if not matches:
            return 0
        low, medium, high = self.config.variance_points
        deltas = np.abs(np.array([m.effective_delta for m in matches], dtype=float))
        variance = float(np.var(deltas))
        if variance < self.config.low_variance:
            return low
        if variance < self.config.medium_variance:
            return medium
        return high

    def _win_rate_points(self, matches: Sequence[MatchRecord]) -> int:
        cfg = self.config
        if len(matches) < cfg.min_matches_for_win_rate:
            return 0
        win_rate = sum(1 for m in matches if m.is_win) / len(matches)
        tight, wide, outside = cfg.win_rate_points
        if cfg.win_rate_tight_band[0] <= win_rate <= cfg.win_rate_tight_band[1]:
            return tight
        if cfg.win_rate_wide_band[0] <= win_rate <= cfg.win_rate_wide_band[1]:
            return wide
        return outside

    def label_for(self, score: int) -> ConfidenceLabel:
        if score >= self.config.high_threshold:
            return ConfidenceLabel.HIGH
        if score >= self.config.medium_threshold:
            return ConfidenceLabel.MEDIUM
        return ConfidenceLabel.LOW

    def score(
        self, matches: Sequence[MatchRecord], is_new_season: bool = False
    ) -> ConfidenceReport:
        cfg = self.config
        components = {
            "sample_size": self._sample_size_points(len(matches)),
            "variance": self._variance_points(matches),
            "recency": (
                cfg.recency_new_season if is_new_season else cfg.recency_established
            ),
            "win_rate": self._win_rate_points(matches),
            "season_context": -cfg.season_context_penalty,
            "shield": cfg.shield_bonus if any(m.shielded for m in matches) else 0,
        }

        total = int(max(0, min(100, sum(components.values()))))
        if len(matches) < cfg.small_sample_size:
            total = min(total, cfg.small_sample_cap)

        report = ConfidenceReport(total, self.label_for(total), components)
        logger.debug(
            "confidence %s from %d matches: %s", report, len(matches), components
        )
        return report


def score_confidence(
    matches: Sequence[MatchRecord],
    is_new_season: bool = False,
    config: ConfidenceConfig | None = None,
) -> ConfidenceReport:
    """Score a match-history sample; see ``ConfidenceScorer``."""
    return ConfidenceScorer(config).score(matches, is_new_season)
