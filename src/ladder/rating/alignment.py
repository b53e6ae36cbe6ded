"""Compare a rating estimate with the rating implied by a rank position."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ladder.core.constants import (
    ALIGNMENT_TOLERANCE,
    BASE_WIN_DELTA,
    PROJECTION_MULTIPLIERS,
    STRONG_MISALIGNMENT,
)
from ladder.core.ladder import position_rating
from ladder.core.tiers import RankPosition
from ladder.core.transforms import round_half_up


class RankAlignment(Enum):
    UNDERRANKED = "underranked"  # rating above what the rank implies
    ALIGNED = "aligned"
    OVERRANKED = "overranked"


@dataclass(frozen=True)
class RatingGap:
    difference: float
    status: RankAlignment


def rating_gap(
    rating: float,
    position: RankPosition,
    tolerance: float = ALIGNMENT_TOLERANCE,
) -> RatingGap:
    """Gap between ``rating`` and the interpolated rating of ``position``."""
    difference = rating - position_rating(position)
    if difference > tolerance:
        status = RankAlignment.UNDERRANKED
    elif difference < -tolerance:
        status = RankAlignment.OVERRANKED
    else:
        status = RankAlignment.ALIGNED
    return RatingGap(difference=difference, status=status)


def project_win_delta(rating: float, position: RankPosition) -> int:
    """
    Projected points for the player's next win.

    Players rated above their rank gain more per win, players rated below
    gain less, in two bands on each side.
    """
    difference = rating - position_rating(position)
    if difference > STRONG_MISALIGNMENT:
        multiplier = PROJECTION_MULTIPLIERS["strong_above"]
    elif difference > ALIGNMENT_TOLERANCE:
        multiplier = PROJECTION_MULTIPLIERS["above"]
    elif difference < -STRONG_MISALIGNMENT:
        multiplier = PROJECTION_MULTIPLIERS["strong_below"]
    elif difference < -ALIGNMENT_TOLERANCE:
        multiplier = PROJECTION_MULTIPLIERS["below"]
    else:
        return BASE_WIN_DELTA
    return round_half_up(BASE_WIN_DELTA * multiplier)
