"""Roster-level rank statistics over lifetime point totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import polars as pl

from ladder.core.tiers import from_total_points, require_int
from ladder.core.transforms import round_half_up

_TABLE_SCHEMA = {
    "total_points": pl.Int64,
    "ladder_index": pl.Int64,
    "tier": pl.Utf8,
    "division": pl.Int64,
    "display_points": pl.Int64,
    "rank": pl.Utf8,
    "sort_key": pl.Int64,
}


@dataclass(frozen=True)
class RankStatistics:
    total_players: int
    tier_distribution: dict[str, int] = field(default_factory=dict)
    average_points: int = 0
    highest_points: int = 0
    lowest_points: int = 0


def rank_table(totals: Iterable[int]) -> pl.DataFrame:
    """
    Decode lifetime totals into one ranked row per player.

    Negative totals are treated as 0. Rows are sorted best first (sort key,
    then points).
    """
    rows = []
    for total in totals:
        total = max(require_int(total, "total points"), 0)
        position = from_total_points(total)
        rows.append(
            {
                "total_points": total,
                "ladder_index": position.ladder_index,
                "tier": position.tier.label,
                "division": position.division,
                "display_points": position.reported_points,
                "rank": position.display_name,
                "sort_key": position.sort_key,
            }
        )
    df = pl.DataFrame(rows, schema=_TABLE_SCHEMA)
    return df.sort(["sort_key", "total_points"], descending=[True, True])


def rank_distribution(totals: Iterable[int]) -> pl.DataFrame:
    """Player count and point range per rank, lowest rank first."""
    return (
        rank_table(totals)
        .group_by(["ladder_index", "rank"])
        .agg(
            [
                pl.len().alias("player_count"),
                pl.col("total_points").mean().alias("avg_points"),
                pl.col("total_points").min().alias("min_points"),
                pl.col("total_points").max().alias("max_points"),
            ]
        )
        .sort("ladder_index")
    )


def rank_statistics(totals: Iterable[int]) -> RankStatistics:
    """
    Summarize a roster of lifetime totals.

    Returns the player count, players per tier, the average total rounded
    half-up, and the highest and lowest totals. An empty roster yields zeros.
    """
    table = rank_table(totals)
    if table.height == 0:
        return RankStatistics(total_players=0)

    per_tier = (
        table.group_by("tier")
        .agg(pl.len().alias("count"))
        .sort("tier")
    )
    distribution = dict(zip(per_tier["tier"].to_list(), per_tier["count"].to_list()))
    points = table["total_points"]
    return RankStatistics(
        total_players=table.height,
        tier_distribution=distribution,
        average_points=round_half_up(points.sum() / table.height),
        highest_points=int(points.max()),
        lowest_points=int(points.min()),
    )
