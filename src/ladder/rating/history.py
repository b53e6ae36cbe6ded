"""
Match history records and their validation.

Match history arrives from a collaborator as rows of
``outcome / rp_change / was_shielded / created_at``. This module turns those
rows into validated ``MatchRecord`` values, rejecting malformed rows at the
boundary so the estimator and scorer can treat every record as well-formed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Sequence

import polars as pl

from ladder.core.constants import (
    MAX_SHIELD_GAMES,
    SHIELD_WARNING_GAMES,
    SHIELDED_LOSS_DELTA,
)
from ladder.core.tiers import require_int

if TYPE_CHECKING:
    from ladder.core.tiers import RankPosition


class Outcome(Enum):
    """Result of a single ranked match."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"

    @property
    def score(self) -> float:
        """Outcome as an expected-score target (1, 0 or 0.5)."""
        return {Outcome.WIN: 1.0, Outcome.LOSS: 0.0, Outcome.DRAW: 0.5}[self]

    @classmethod
    def parse(cls, value: Outcome | str) -> Outcome:
        if isinstance(value, Outcome):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown match outcome {value!r}; expected win, loss or draw"
            ) from None


@dataclass(frozen=True)
class MatchRecord:
    """
    One match as seen by the player.

    ``point_delta`` is the displayed change. A shielded loss displays 0 but
    still counts as ``SHIELDED_LOSS_DELTA`` for rating purposes.
    """

    outcome: Outcome
    point_delta: int
    shielded: bool = False

    def __post_init__(self) -> None:
        outcome = Outcome.parse(self.outcome)
        delta = require_int(self.point_delta, "point delta")
        object.__setattr__(self, "outcome", outcome)
        object.__setattr__(self, "point_delta", delta)
        object.__setattr__(self, "shielded", bool(self.shielded))

        if outcome is Outcome.WIN and delta <= 0:
            raise ValueError(f"A win must gain points, got delta {delta}")
        if outcome is Outcome.LOSS and delta > 0:
            raise ValueError(f"A loss cannot gain points, got delta {delta}")
        if self.shielded and outcome is not Outcome.LOSS:
            raise ValueError(
                f"Only losses can be shielded, got a shielded {outcome.value}"
            )
        if self.shielded and delta != 0:
            raise ValueError(
                f"A shielded loss displays a delta of 0, got {delta}"
            )

    @property
    def effective_delta(self) -> int:
        """Delta used internally for rating purposes."""
        return SHIELDED_LOSS_DELTA if self.shielded else self.point_delta

    @property
    def is_win(self) -> bool:
        return self.outcome is Outcome.WIN


_DELTA_KEYS = ("point_delta", "rp_change", "rpChange")
_SHIELD_KEYS = ("shielded", "was_shielded", "wasShielded")


def _first_present(row: dict[str, Any], keys: Sequence[str], default=None):
    for key in keys:
        if key in row and row[key] is not None:
            return row[key]
    return default


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        text = value.strip().lower()
        if text in {"1", "true", "yes", "t", "y"}:
            return True
        if text in {"", "0", "false", "no", "f", "n"}:
            return False
        raise ValueError(f"Cannot interpret {value!r} as a shield flag")
    return bool(value)


def match_from_record(row: dict[str, Any]) -> MatchRecord:
    """Build a MatchRecord from a collaborator row."""
    if "outcome" not in row:
        raise ValueError(f"Match row is missing 'outcome': {row!r}")
    delta = _first_present(row, _DELTA_KEYS)
    if delta is None:
        raise ValueError(f"Match row is missing a point delta: {row!r}")
    return MatchRecord(
        outcome=Outcome.parse(row["outcome"]),
        point_delta=delta,
        shielded=_parse_flag(_first_present(row, _SHIELD_KEYS, False)),
    )


def matches_from_records(rows: Iterable[dict[str, Any]]) -> list[MatchRecord]:
    return [match_from_record(row) for row in rows]


def matches_from_dataframe(df: pl.DataFrame) -> list[MatchRecord]:
    """
    Convert a match-history DataFrame into MatchRecords.

    Parameters
    ----------
    df : pl.DataFrame
        Must contain ``outcome`` and one of ``point_delta`` / ``rp_change``.
        ``shielded`` / ``was_shielded`` is optional. When ``created_at`` or
        ``match_number`` is present, rows are ordered by it (oldest first).

    Returns
    -------
    list[MatchRecord]
        Records in chronological order.
    """
    if "outcome" not in df.columns:
        raise ValueError("Match history is missing the 'outcome' column")
    if not any(key in df.columns for key in _DELTA_KEYS):
        raise ValueError(
            f"Match history needs one of the columns {', '.join(_DELTA_KEYS)}"
        )

    for order_column in ("created_at", "match_number"):
        if order_column in df.columns:
            df = df.sort(order_column, maintain_order=True)
            break

    return matches_from_records(df.iter_rows(named=True))


def matches_to_dataframe(matches: Sequence[MatchRecord]) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "outcome": [m.outcome.value for m in matches],
            "point_delta": [m.point_delta for m in matches],
            "effective_delta": [m.effective_delta for m in matches],
            "shielded": [m.shielded for m in matches],
        },
        schema={
            "outcome": pl.Utf8,
            "point_delta": pl.Int64,
            "effective_delta": pl.Int64,
            "shielded": pl.Boolean,
        },
    )


@dataclass(frozen=True)
class ShieldStatus:
    active: bool
    games_used: int
    warning: bool

    @property
    def games_remaining(self) -> int:
        return max(MAX_SHIELD_GAMES - self.games_used, 0)


def shield_status(
    position: RankPosition,
    matches: Sequence[MatchRecord],
    shield_games_used: int | None = None,
) -> ShieldStatus:
    """
    Demotion-shield state of a player.

    When ``shield_games_used`` is not reported by the collaborator it is
    inferred from losses that displayed no point change. The shield is active
    while the player sits at 0 display points with at least one shield game
    used.
    """
    if shield_games_used is None:
        games = min(
            sum(
                1
                for m in matches
                if m.outcome is Outcome.LOSS
                and (m.shielded or m.point_delta == 0)
            ),
            MAX_SHIELD_GAMES,
        )
    else:
        games = require_int(shield_games_used, "shield games used")
        if not 0 <= games <= MAX_SHIELD_GAMES:
            raise ValueError(
                f"Shield games used must be within [0, {MAX_SHIELD_GAMES}], got {games}"
            )
    return ShieldStatus(
        active=position.display_points == 0 and games > 0,
        games_used=games,
        warning=games >= SHIELD_WARNING_GAMES,
    )
