"""Configuration dataclasses for the ladder engine."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from ladder.core import constants as C


@dataclass
class EstimatorConfig:
    """Configuration for the match-by-match rating estimator."""

    # Initial uncertainty
    deviation_new_season: float = C.DEVIATION_NEW_SEASON
    deviation_established: float = C.DEVIATION_ESTABLISHED
    deviation_blended_season: float = C.DEVIATION_BLENDED_SEASON
    volatility_with_prior: float = C.VOLATILITY_WITH_PRIOR
    volatility_without_prior: float = C.VOLATILITY_WITHOUT_PRIOR

    # Floors
    min_deviation: float = C.MIN_DEVIATION
    min_volatility: float = C.MIN_VOLATILITY

    # Per-match uncertainty updates
    deviation_decay: float = C.DEVIATION_DECAY_PER_MATCH
    deviation_surprise_weight: float = C.DEVIATION_SURPRISE_WEIGHT
    volatility_surprise_weight: float = C.VOLATILITY_SURPRISE_WEIGHT
    surprise_scale: float = C.SURPRISE_SCALE

    # Expected deltas and difficulty scaling
    base_win_delta: int = C.BASE_WIN_DELTA
    base_loss_delta: int = C.BASE_LOSS_DELTA
    base_draw_delta: int = C.BASE_DRAW_DELTA
    difficulty_reference: float = C.DIFFICULTY_REFERENCE_RATING
    min_difficulty: float = C.MIN_DIFFICULTY_MULTIPLIER
    max_difficulty: float = C.MAX_DIFFICULTY_MULTIPLIER

    # Rating step factors
    win_factor: float = C.WIN_RATING_FACTOR
    loss_factor: float = C.LOSS_RATING_FACTOR
    draw_factor: float = C.DRAW_RATING_FACTOR
    min_win_gain: float = C.MIN_WIN_RATING_GAIN
    min_loss_drop: float = C.MIN_LOSS_RATING_DROP

    shielded_loss_delta: int = C.SHIELDED_LOSS_DELTA


@dataclass
class PredictorConfig:
    """Configuration for counter-delta prediction."""

    k_factor: float = C.DEFAULT_K_FACTOR
    logistic_scale: float = C.LOGISTIC_SCALE
    symmetry_tolerance: int = C.SYMMETRY_TOLERANCE


@dataclass
class SimulationConfig:
    """Configuration for ladder progression simulation."""

    k_factor: float = C.DEFAULT_K_FACTOR
    diminishing_divisor: float = C.DIMINISHING_RETURN_DIVISOR
    diminishing_epsilon: float = C.DIMINISHING_RETURN_EPSILON
    min_step_magnitude: int = C.MIN_STEP_MAGNITUDE
    max_games: int = C.MAX_SIMULATION_GAMES

    def __post_init__(self) -> None:
        # max_games may lower the game cap but never lift it
        if not C.MIN_SIMULATION_GAMES <= self.max_games <= C.MAX_SIMULATION_GAMES:
            raise ValueError(
                f"max_games must be within [{C.MIN_SIMULATION_GAMES}, "
                f"{C.MAX_SIMULATION_GAMES}], got {self.max_games}"
            )


@dataclass
class ConfidenceConfig:
    """
    Configuration for the heuristic confidence scorer.

    Point tables are ordered from the best band to the worst:
    ``sample_size_points`` holds ``(min_matches, points)`` pairs and
    ``variance_points`` / ``win_rate_points`` hold the tight, medium and
    wide band awards.
    """

    sample_size_points: tuple[tuple[int, int], ...] = C.SAMPLE_SIZE_POINTS
    sample_size_floor: int = C.SAMPLE_SIZE_FLOOR_POINTS
    variance_points: tuple[int, int, int] = C.VARIANCE_POINTS
    low_variance: float = C.LOW_VARIANCE_THRESHOLD
    medium_variance: float = C.MEDIUM_VARIANCE_THRESHOLD
    recency_established: int = C.RECENCY_ESTABLISHED_POINTS
    recency_new_season: int = C.RECENCY_NEW_SEASON_POINTS
    min_matches_for_win_rate: int = C.MIN_MATCHES_FOR_WIN_RATE
    win_rate_tight_band: float = C.WIN_RATE_TIGHT_BAND
    win_rate_wide_band: float = C.WIN_RATE_WIDE_BAND
    win_rate_points: tuple[int, int, int] = C.WIN_RATE_POINTS
    season_context_penalty: int = C.SEASON_CONTEXT_PENALTY
    shield_bonus: int = C.SHIELD_SAMPLE_BONUS
    small_sample_size: int = C.MIN_MATCHES_FOR_UNCAPPED_SCORE
    small_sample_cap: int = C.SMALL_SAMPLE_SCORE_CAP
    medium_threshold: int = C.MEDIUM_CONFIDENCE_THRESHOLD
    high_threshold: int = C.HIGH_CONFIDENCE_THRESHOLD


@dataclass
class EngineConfig:
    """Bundle of every engine section."""

    estimator: EstimatorConfig = field(default_factory=EstimatorConfig)
    predictor: PredictorConfig = field(default_factory=PredictorConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    confidence: ConfidenceConfig = field(default_factory=ConfidenceConfig)


_SECTIONS = {
    "estimator": EstimatorConfig,
    "predictor": PredictorConfig,
    "simulation": SimulationConfig,
    "confidence": ConfidenceConfig,
}


def _build_section(name: str, values: dict[str, Any]) -> Any:
    cls = _SECTIONS[name]
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(
            f"Unknown keys in '{name}' config section: {', '.join(unknown)}"
        )
    return cls(**values)


def engine_config_from_dict(data: dict[str, Any]) -> EngineConfig:
    """
    Build an EngineConfig from a nested dictionary.

    Missing sections keep their defaults. Unknown sections or keys raise
    ``ValueError``.
    """
    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(unknown)}")

    sections = {}
    for name in _SECTIONS:
        values = data.get(name) or {}
        if not isinstance(values, dict):
            raise ValueError(f"Config section '{name}' must be a mapping")
        sections[name] = _build_section(name, values)
    return EngineConfig(**sections)


def load_engine_config(path: str | Path | None) -> EngineConfig:
    """Load an EngineConfig from a YAML file (defaults when path is None)."""
    if path is None:
        return EngineConfig()
    cfg_path = Path(path)
    with cfg_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config format at {cfg_path}")
    return engine_config_from_dict(data)
