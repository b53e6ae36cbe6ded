"""
Tier enumeration and rank positions for the 21-position ladder.

The ladder is a strictly ordered sequence of (tier, division) rungs indexed
0..20. Every rung below the terminal tier holds 100 points, so a raw lifetime
total maps to ``ladder_index = total // 100`` and ``display_points = total % 100``
until the Nightmare pool, which starts at 2000 and is unbounded.
"""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from enum import IntEnum

from ladder.core.constants import (
    MAX_DISPLAY_POINTS,
    MAX_LADDER_INDEX,
    MAX_TOTAL_POINTS,
    MIN_LADDER_INDEX,
    MIN_TOTAL_POINTS,
    POINTS_PER_DIVISION,
    SORT_KEY_TIER_WEIGHT,
    TIER_LAYOUT,
)


class Tier(IntEnum):
    """Ordered rank tiers; the value is the tier's sorting ordinal."""

    BRONZE = 1
    SILVER = 2
    GOLD = 3
    PLATINUM = 4
    DIAMOND = 5
    EMERALD = 6
    NIGHTMARE = 7

    @property
    def label(self) -> str:
        return TIER_LAYOUT[self.value - 1][0]

    @property
    def divisions(self) -> int:
        return TIER_LAYOUT[self.value - 1][1]

    @property
    def min_points(self) -> int:
        """Lifetime total at which this tier starts."""
        return TIER_LAYOUT[self.value - 1][2]

    @property
    def has_levels(self) -> bool:
        """Whether the tier shows a division number in its display name."""
        return self.divisions > 1

    @property
    def first_index(self) -> int:
        return self.min_points // POINTS_PER_DIVISION

    @classmethod
    def parse(cls, name: str) -> Tier:
        """Look up a tier by name, case-insensitively."""
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(
                f"Unknown tier {name!r}; expected one of "
                f"{', '.join(t.label for t in cls)}"
            ) from None


# Ladder index -> (tier, division), built from the tier layout
LADDER: tuple[tuple[Tier, int], ...] = tuple(
    (tier, division)
    for tier in Tier
    for division in range(1, tier.divisions + 1)
)

_RANK_NAME = re.compile(r"^\s*([A-Za-z]+)(?:[\s_-]*(\d+))?\s*$")


def require_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


def ladder_index(tier: Tier | str, division: int = 1) -> int:
    """Ladder index (0..20) of a tier/division pair."""
    if not isinstance(tier, Tier):
        tier = Tier.parse(tier)
    division = require_int(division, "division")
    if not 1 <= division <= tier.divisions:
        raise ValueError(
            f"{tier.label} has divisions 1..{tier.divisions}, got {division}"
        )
    return tier.first_index + division - 1


def rung(index: int) -> tuple[Tier, int]:
    """(tier, division) for a ladder index."""
    index = require_int(index, "ladder index")
    if not MIN_LADDER_INDEX <= index <= MAX_LADDER_INDEX:
        raise ValueError(
            f"Ladder index must be within [{MIN_LADDER_INDEX}, {MAX_LADDER_INDEX}], got {index}"
        )
    return LADDER[index]


@dataclass(frozen=True)
class RankPosition:
    """
    A player's place on the ladder.

    ``display_points`` is the 0..99 progress within the division. In the
    terminal Nightmare tier it is the unbounded point pool above 2000 instead;
    ``reported_points`` clamps it for display.
    """

    ladder_index: int
    display_points: int = 0

    def __post_init__(self) -> None:
        index = require_int(self.ladder_index, "ladder index")
        points = require_int(self.display_points, "display points")
        if not MIN_LADDER_INDEX <= index <= MAX_LADDER_INDEX:
            raise ValueError(
                f"Ladder index must be within [{MIN_LADDER_INDEX}, {MAX_LADDER_INDEX}], got {index}"
            )
        if points < 0:
            raise ValueError(f"Display points cannot be negative, got {points}")
        if index < MAX_LADDER_INDEX and points > MAX_DISPLAY_POINTS:
            raise ValueError(
                f"Display points must be within [0, {MAX_DISPLAY_POINTS}] below "
                f"the terminal tier, got {points}"
            )
        object.__setattr__(self, "ladder_index", index)
        object.__setattr__(self, "display_points", points)

    @classmethod
    def from_rank(
        cls, tier: Tier | str, division: int = 1, display_points: int = 0
    ) -> RankPosition:
        return cls(ladder_index(tier, division), display_points)

    @classmethod
    def from_name(cls, name: str, display_points: int = 0) -> RankPosition:
        return cls(parse_rank(name), display_points)

    @classmethod
    def from_total_points(cls, total: int) -> RankPosition:
        return from_total_points(total)

    @property
    def tier(self) -> Tier:
        return LADDER[self.ladder_index][0]

    @property
    def division(self) -> int:
        return LADDER[self.ladder_index][1]

    @property
    def level(self) -> int:
        """Division number as shown to players; 0 for single-division tiers."""
        return self.division if self.tier.has_levels else 0

    @property
    def is_terminal(self) -> bool:
        return self.ladder_index == MAX_LADDER_INDEX

    @property
    def reported_points(self) -> int:
        return min(self.display_points, MAX_DISPLAY_POINTS)

    @property
    def display_name(self) -> str:
        if not self.tier.has_levels:
            return self.tier.label
        return f"{self.tier.label} {self.division}"

    @property
    def sort_key(self) -> int:
        return self.tier.value * SORT_KEY_TIER_WEIGHT + self.level

    @property
    def total_points(self) -> int:
        return to_total_points(self)

    def __str__(self) -> str:
        return f"{self.display_name} ({self.reported_points} RP)"


def parse_rank(name: str) -> int:
    """
    Parse a rank label into a ladder index.

    Accepts ``"Gold 2"``, ``"GOLD_2"``, ``"gold2"``, ``"Emerald"``,
    ``"EMERALD_1"`` and ``"Nightmare"``. Single-division tiers may omit the
    division; multi-division tiers may not.
    """
    if not isinstance(name, str):
        raise ValueError(f"Rank name must be a string, got {name!r}")
    match = _RANK_NAME.match(name)
    if match is None:
        raise ValueError(f"Unrecognized rank name {name!r}")
    tier = Tier.parse(match.group(1))
    if match.group(2) is None:
        if tier.has_levels:
            raise ValueError(
                f"Rank name {name!r} is missing a division (1..{tier.divisions})"
            )
        return ladder_index(tier, 1)
    return ladder_index(tier, int(match.group(2)))


def is_valid_total_points(total) -> bool:
    """Whether a raw lifetime total is a plausible integer value."""
    if isinstance(total, bool) or not isinstance(total, numbers.Integral):
        return False
    return MIN_TOTAL_POINTS <= total <= MAX_TOTAL_POINTS


def from_total_points(total: int) -> RankPosition:
    """Convert a raw lifetime total into a rank position.

    Negative totals are treated as 0.
    """
    total = max(require_int(total, "total points"), MIN_TOTAL_POINTS)
    nightmare_floor = Tier.NIGHTMARE.min_points
    if total >= nightmare_floor:
        return RankPosition(MAX_LADDER_INDEX, total - nightmare_floor)
    index, points = divmod(total, POINTS_PER_DIVISION)
    return RankPosition(index, points)


def to_total_points(position: RankPosition) -> int:
    return position.ladder_index * POINTS_PER_DIVISION + position.display_points


def next_rank(position: RankPosition) -> tuple[Tier, int] | None:
    """The next rung up, or None at the top of the ladder."""
    if position.is_terminal:
        return None
    return LADDER[position.ladder_index + 1]


def points_to_next_rank(position: RankPosition) -> int:
    if position.is_terminal:
        return 0
    return POINTS_PER_DIVISION - position.display_points


def rank_change_description(old: RankPosition, new: RankPosition) -> str:
    if new.sort_key > old.sort_key:
        return f"Promoted from {old.display_name} to {new.display_name}"
    if new.sort_key < old.sort_key:
        return f"Demoted from {old.display_name} to {new.display_name}"
    return f"Progressed in {new.display_name}"
