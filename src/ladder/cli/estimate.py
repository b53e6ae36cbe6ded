from __future__ import annotations

"""
Estimate a player's rating from their rank and recent match history.

Usage:
  ladder-estimate --rank "Gold 1" --points 50 \
    --matches history.csv \
    --simulate 20 --win-rate 0.55 --seed 7

Match history files are CSV or JSON (array of objects) with the columns
``outcome``, ``rp_change`` (or ``point_delta``), optional ``was_shielded``
and optional ``created_at`` for ordering.
"""

import argparse
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

import polars as pl

from ladder.analysis.confidence import ConfidenceScorer
from ladder.core.config import EngineConfig, load_engine_config
from ladder.core.logging import get_logger, setup_logging
from ladder.core.sentry import init_sentry
from ladder.core.tiers import RankPosition
from ladder.prediction.counter import CounterPredictor
from ladder.rating.alignment import project_win_delta, rating_gap
from ladder.rating.estimator import RatingEstimator
from ladder.rating.history import (
    MatchRecord,
    Outcome,
    matches_from_dataframe,
    shield_status,
)
from ladder.simulation.progression import ProgressionSimulator

logger = get_logger(__name__)


def _load_matches(path: Optional[str]) -> list[MatchRecord]:
    if not path:
        return []
    file_path = Path(path)
    if not file_path.exists():
        raise ValueError(f"Match history file not found: {file_path}")
    suffix = file_path.suffix.lower()
    if suffix == ".csv":
        df = pl.read_csv(file_path)
    elif suffix == ".json":
        df = pl.read_json(file_path)
    else:
        raise ValueError(
            f"Unsupported match history format {suffix!r}; use .csv or .json"
        )
    return matches_from_dataframe(df)


def _average_delta(matches: Sequence[MatchRecord], outcome: Outcome) -> Optional[float]:
    deltas = [m.effective_delta for m in matches if m.outcome is outcome]
    if not deltas:
        return None
    return sum(deltas) / len(deltas)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate rating, confidence and ladder progression for a player"
    )
    parser.add_argument(
        "--rank", type=str, required=True, help='Current rank, e.g. "Gold 1"'
    )
    parser.add_argument(
        "--points",
        type=int,
        default=0,
        help="Display points within the current division",
    )
    parser.add_argument(
        "--matches",
        type=str,
        default=None,
        help="Match history file (.csv or .json)",
    )
    parser.add_argument(
        "--new-season",
        action="store_true",
        help="The player is at the start of a new season",
    )
    parser.add_argument(
        "--previous-rating",
        type=float,
        default=None,
        help="Known rating from the previous season",
    )
    parser.add_argument(
        "--shield-games",
        type=int,
        default=None,
        help="Demotion-shield games used (inferred from history when omitted)",
    )
    parser.add_argument(
        "--simulate",
        type=int,
        default=None,
        metavar="GAMES",
        help="Simulate this many future games",
    )
    parser.add_argument(
        "--win-rate",
        type=float,
        default=0.5,
        help="Win probability used by the simulation",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the simulation"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=os.getenv("LADDER_CONFIG_PATH"),
        help="YAML engine config overriding the default tuning constants",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    config: EngineConfig = load_engine_config(args.config)
    position = RankPosition.from_name(args.rank, args.points)
    matches = _load_matches(args.matches)
    logger.info(
        "Estimating %s from %d matches", position, len(matches)
    )

    state = RatingEstimator(config.estimator).estimate(
        position, matches, args.new_season, args.previous_rating
    )
    report = ConfidenceScorer(config.confidence).score(matches, args.new_season)
    gap = rating_gap(state.rating, position)
    shown = state.rounded()

    print(f"Rank:        {position}")
    print(
        f"Rating:      {shown.rating:.0f} "
        f"(deviation {shown.deviation:.2f}, volatility {shown.volatility:.3f})"
    )
    print(f"Confidence:  {report}")
    print(f"Rating gap:  {gap.difference:+.0f} ({gap.status.value})")
    print(f"Next win:    +{project_win_delta(state.rating, position)} RP (projected)")

    shield = shield_status(position, matches, args.shield_games)
    if shield.active:
        print(
            f"Shield:      active, {shield.games_remaining} game(s) remaining"
            + (" (warning)" if shield.warning else "")
        )

    avg_win = _average_delta(matches, Outcome.WIN)
    avg_loss = _average_delta(matches, Outcome.LOSS)
    if avg_win is not None and avg_loss is not None:
        check = CounterPredictor(config.predictor).check_symmetry(
            avg_win, avg_loss, state.rating
        )
        status = "consistent" if check.consistent else ", ".join(check.warnings)
        print(
            f"Symmetry:    predicted win {check.predicted_win}, "
            f"predicted loss {check.predicted_loss} ({status})"
        )

    if args.simulate is not None:
        win_delta = avg_win if avg_win is not None else config.estimator.base_win_delta
        loss_delta = avg_loss if avg_loss is not None and avg_loss < 0 else config.estimator.base_loss_delta
        result = ProgressionSimulator(config.simulation, seed=args.seed).run(
            state.rating,
            position,
            args.win_rate,
            win_delta,
            loss_delta,
            args.simulate,
        )
        print(
            f"Simulation:  {result.games} games, {result.wins} wins -> "
            f"{result.final_position} "
            f"({result.promotions} promotions, {result.demotions} demotions)"
        )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        lvl = os.getenv("LADDER_LOG_LEVEL", "WARNING")
        fmt = os.getenv("LADDER_LOG_FORMAT", "simple")
        setup_logging(level=lvl, format_style=fmt)
    except ValueError:
        logging.basicConfig(level=logging.WARNING)
    init_sentry(context="ladder_estimate")

    try:
        run(args)
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
