"""
Ladder progression simulation.

Simulates a run of future games for a player: each game draws a win or loss,
scales the average point delta by how far the rating sits from the current
division's baseline, moves the player one step along the ladder and drifts the
rating as if every matchup were even.

Outcomes come from an injected ``numpy.random.Generator`` (or a seed), or
from an explicit outcome sequence, which makes trajectories fully
reproducible in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import polars as pl

from ladder.core.config import SimulationConfig
from ladder.core.constants import MAX_SIMULATION_GAMES, MIN_SIMULATION_GAMES
from ladder.core.ladder import advance_one_step, tier_baseline
from ladder.core.logging import get_logger, log_timing
from ladder.core.tiers import RankPosition
from ladder.core.transforms import round_half_up

logger = get_logger(__name__)


@dataclass(frozen=True)
class SimulationStep:
    game_index: int
    won: bool
    display_points: int
    position: RankPosition
    rating: int
    point_delta: int
    promoted: bool = False
    demoted: bool = False


@dataclass(frozen=True)
class SimulationResult:
    """Ordered simulation steps plus summary counters."""

    steps: tuple[SimulationStep, ...]
    start_position: RankPosition
    start_rating: float
    final_position: RankPosition
    final_rating: float
    promotions: int
    demotions: int

    @property
    def games(self) -> int:
        return len(self.steps)

    @property
    def wins(self) -> int:
        return sum(1 for step in self.steps if step.won)

    @property
    def net_points(self) -> int:
        return self.final_position.total_points - self.start_position.total_points

    def to_dataframe(self) -> pl.DataFrame:
        """One row per simulated game."""
        return pl.DataFrame(
            {
                "game": [s.game_index for s in self.steps],
                "won": [s.won for s in self.steps],
                "point_delta": [s.point_delta for s in self.steps],
                "ladder_index": [s.position.ladder_index for s in self.steps],
                "rank": [s.position.display_name for s in self.steps],
                "display_points": [s.display_points for s in self.steps],
                "rating": [s.rating for s in self.steps],
                "promoted": [s.promoted for s in self.steps],
                "demoted": [s.demoted for s in self.steps],
            }
        )


class ProgressionSimulator:
    """
    Simulate ladder trajectories.

    Parameters
    ----------
    config : SimulationConfig, optional
        Tuning constants (k-factor, diminishing-return divisor, game cap).
    seed : int, optional
        Seed for the default random generator.
    rng : numpy.random.Generator, optional
        Random source for outcome draws; takes precedence over ``seed``.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def _validate(
        self,
        games: int,
        win_rate: float,
        avg_win_delta: float,
        avg_loss_delta: float,
        outcomes: Sequence[bool] | None,
    ) -> None:
        if isinstance(games, bool) or not isinstance(games, (int, np.integer)):
            raise ValueError(f"Game count must be an integer, got {games!r}")
        max_games = min(self.config.max_games, MAX_SIMULATION_GAMES)
        if not MIN_SIMULATION_GAMES <= games <= max_games:
            raise ValueError(
                f"Game count must be within [{MIN_SIMULATION_GAMES}, {max_games}], got {games}"
            )
        if not 0.0 <= win_rate <= 1.0:
            raise ValueError(f"Win rate must be within [0, 1], got {win_rate}")
        if not avg_win_delta > 0:
            raise ValueError(
                f"Average win delta must be positive, got {avg_win_delta}"
            )
        if not avg_loss_delta < 0:
            raise ValueError(
                f"Average loss delta must be negative, got {avg_loss_delta}"
            )
        if outcomes is not None and len(outcomes) < games:
            raise ValueError(
                f"Need at least {games} outcomes, got {len(outcomes)}"
            )

    def scaled_delta(self, won: bool, base_delta: float, rating: float, ladder_index: int) -> int:
        """
        Point delta for one game after diminishing returns.

        Wins by a player rated above the division baseline and losses by a
        player rated below it are scaled by ``1 - gap / divisor`` (never below
        epsilon). The result keeps the outcome's sign with magnitude >= 1.
        """
        cfg = self.config
        baseline = tier_baseline(ladder_index)
        delta = base_delta
        if won and rating > baseline:
            delta *= max(cfg.diminishing_epsilon, 1 - (rating - baseline) / cfg.diminishing_divisor)
        elif not won and rating < baseline:
            delta *= max(cfg.diminishing_epsilon, 1 - (baseline - rating) / cfg.diminishing_divisor)

        delta = round_half_up(delta)
        if won:
            return max(cfg.min_step_magnitude, delta)
        return min(-cfg.min_step_magnitude, delta)

    def run(
        self,
        rating: float,
        start: RankPosition,
        win_rate: float,
        avg_win_delta: float,
        avg_loss_delta: float,
        games: int,
        outcomes: Sequence[bool] | None = None,
        k: float | None = None,
    ) -> SimulationResult:
        """
        Simulate ``games`` games from ``start``.

        When ``outcomes`` is given its first ``games`` entries are used
        instead of random draws.
        """
        self._validate(games, win_rate, avg_win_delta, avg_loss_delta, outcomes)
        k = self.config.k_factor if k is None else k

        position = start
        current_rating = float(rating)
        promotions = demotions = 0
        steps = []

        with log_timing(logger, f"simulating {games} games from {start.display_name}"):
            for game in range(games):
                if outcomes is not None:
                    won = bool(outcomes[game])
                else:
                    won = bool(self.rng.random() < win_rate)

                base = avg_win_delta if won else avg_loss_delta
                delta = self.scaled_delta(won, base, current_rating, position.ladder_index)

                position, promoted, demoted = advance_one_step(position, delta)
                promotions += promoted
                demotions += demoted

                current_rating += k * ((1.0 if won else 0.0) - 0.5)

                steps.append(
                    SimulationStep(
                        game_index=game + 1,
                        won=won,
                        display_points=position.reported_points,
                        position=position,
                        rating=round_half_up(current_rating),
                        point_delta=delta,
                        promoted=promoted,
                        demoted=demoted,
                    )
                )

        result = SimulationResult(
            steps=tuple(steps),
            start_position=start,
            start_rating=float(rating),
            final_position=position,
            final_rating=current_rating,
            promotions=promotions,
            demotions=demotions,
        )
        logger.info(
            "simulated %d games: %s -> %s, %d promotions, %d demotions",
            games,
            start.display_name,
            position.display_name,
            promotions,
            demotions,
        )
        return result


def simulate_progression(
    rating: float,
    start: RankPosition,
    win_rate: float,
    avg_win_delta: float,
    avg_loss_delta: float,
    games: int,
    outcomes: Sequence[bool] | None = None,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    config: SimulationConfig | None = None,
    k: float | None = None,
) -> SimulationResult:
    """Simulate a ladder trajectory; see ``ProgressionSimulator.run``."""
    simulator = ProgressionSimulator(config=config, seed=seed, rng=rng)
    return simulator.run(
        rating, start, win_rate, avg_win_delta, avg_loss_delta, games, outcomes, k=k
    )
