"""
Rank ladder arithmetic.

Two promotion policies exist and are deliberately kept apart:

``advance_one_step``
    The per-game policy: at most one promotion or demotion per call, with the
    remainder renormalized into the new division.
``carry_lifetime_delta`` / ``reconstruct_lifetime_delta``
    The historical-reporting policy: a point delta between two arbitrary
    snapshots carries across every division boundary it crosses.

Both treat the Emerald -> Nightmare boundary specially. Points carried upward
into Nightmare land in its unbounded pool and are never carried further, while
borrowing back down out of Nightmare only happens once that pool drops below
zero.
"""

from __future__ import annotations

from typing import NamedTuple

from ladder.core.constants import (
    BASELINE_RATINGS,
    MAX_DISPLAY_POINTS,
    MAX_LADDER_INDEX,
    MIN_LADDER_INDEX,
    MIN_TOTAL_POINTS,
    POINTS_PER_DIVISION,
)
from ladder.core.tiers import (
    RankPosition,
    from_total_points,
    require_int,
    rung,
    to_total_points,
)
from ladder.core.transforms import clamp


class AdvanceResult(NamedTuple):
    position: RankPosition
    promoted: bool
    demoted: bool


class LifetimeCarry(NamedTuple):
    position: RankPosition
    rungs_crossed: int


def tier_baseline(ladder_index: int) -> int:
    """Flat baseline rating of a ladder index."""
    rung(ladder_index)
    return BASELINE_RATINGS[ladder_index]


def interpolated_rating(ladder_index: int, display_points: float = 0) -> float:
    """
    Expected rating for a ladder index and in-division progress.

    Linearly interpolates between the baseline of ``ladder_index`` and the
    next index (the same index at the top), weighted by
    ``clamp(display_points / 100, 0, 1)``.

    Examples
    --------
    >>> interpolated_rating(8, 50)
    1750.0
    >>> interpolated_rating(20, 300)
    2500.0
    """
    current = tier_baseline(ladder_index)
    upper = BASELINE_RATINGS[min(ladder_index + 1, MAX_LADDER_INDEX)]
    progress = clamp(display_points / POINTS_PER_DIVISION, 0.0, 1.0)
    return current + (upper - current) * progress


def position_rating(position: RankPosition) -> float:
    return interpolated_rating(position.ladder_index, position.display_points)


def _renormalize(index: int, points: int) -> int:
    if index == MAX_LADDER_INDEX:
        return max(points, 0)
    return int(clamp(points, 0, MAX_DISPLAY_POINTS))


def advance_one_step(position: RankPosition, delta: int) -> AdvanceResult:
    """
    Apply one game's point delta with the single-hop policy.

    A result of 100 or more promotes exactly once (never past the top), a
    negative result demotes exactly once (never below the bottom), and the
    remaining points are clamped into the new division. A delta of 0 returns
    an equal position.
    """
    delta = require_int(delta, "point delta")
    index = position.ladder_index
    points = position.display_points + delta
    promoted = demoted = False

    if points >= POINTS_PER_DIVISION and index < MAX_LADDER_INDEX:
        points -= POINTS_PER_DIVISION
        index += 1
        promoted = True
    elif points < 0 and index > MIN_LADDER_INDEX:
        points += POINTS_PER_DIVISION
        index -= 1
        demoted = True

    return AdvanceResult(
        RankPosition(index, _renormalize(index, points)), promoted, demoted
    )


advance = advance_one_step


def carry_lifetime_delta(position: RankPosition, delta: int) -> LifetimeCarry:
    """
    Apply a point delta carrying across every division boundary crossed.

    Used for historical reporting where two snapshots may be many divisions
    apart. The lifetime total never drops below 0.
    """
    delta = require_int(delta, "point delta")
    total = max(to_total_points(position) + delta, MIN_TOTAL_POINTS)
    new_position = from_total_points(total)
    return LifetimeCarry(
        new_position, new_position.ladder_index - position.ladder_index
    )


def reconstruct_lifetime_delta(
    before: RankPosition, after: RankPosition
) -> int:
    """Signed lifetime point change between two arbitrary snapshots."""
    return to_total_points(after) - to_total_points(before)
