"""
Configuration constants for the rank ladder and rating engine.

This module centralizes the ladder tables and every default tuning parameter
used by the estimator, predictor, simulator and confidence scorer so they can
be tuned without touching the algorithms themselves.

The Baseline Rating Table and tier layout are versioned: historical
comparisons depend on bit-exact reproduction, so any change to them must bump
``BASELINE_TABLE_VERSION``.
"""

# =============================================================================
# Ladder Layout
# =============================================================================

BASELINE_TABLE_VERSION: str = "2025.1"

# Points in one division; every division except the terminal pool holds 100
POINTS_PER_DIVISION: int = 100
MAX_DISPLAY_POINTS: int = POINTS_PER_DIVISION - 1

# (name, divisions, minimum lifetime points) in ladder order
TIER_LAYOUT: tuple[tuple[str, int, int], ...] = (
    ("Bronze", 4, 0),
    ("Silver", 4, 400),
    ("Gold", 4, 800),
    ("Platinum", 4, 1200),
    ("Diamond", 3, 1600),
    ("Emerald", 1, 1900),
    ("Nightmare", 1, 2000),
)

LADDER_SIZE: int = 21
MIN_LADDER_INDEX: int = 0
MAX_LADDER_INDEX: int = LADDER_SIZE - 1

# Ladder index -> baseline rating (monotonically non-decreasing)
BASELINE_RATINGS: tuple[int, ...] = (
    0,  # Bronze 1
    500,
    900,
    1100,
    1400,  # Silver 1
    1480,
    1550,
    1620,
    1700,  # Gold 1
    1800,
    1880,
    1960,
    2020,  # Platinum 1
    2070,
    2100,
    2150,
    2170,  # Diamond 1
    2230,
    2300,
    2370,  # Emerald
    2500,  # Nightmare
)

# Sort key multiplier: tier_ordinal * 1000 + level
SORT_KEY_TIER_WEIGHT: int = 1000

# Sanity bounds for a raw lifetime total
MIN_TOTAL_POINTS: int = 0
MAX_TOTAL_POINTS: int = 10_000

# =============================================================================
# Rating Estimator Parameters
# =============================================================================

DEVIATION_NEW_SEASON: float = 2.5
DEVIATION_ESTABLISHED: float = 1.8
DEVIATION_BLENDED_SEASON: float = 2.2
VOLATILITY_WITH_PRIOR: float = 0.06
VOLATILITY_WITHOUT_PRIOR: float = 0.08

MIN_DEVIATION: float = 0.8
MIN_VOLATILITY: float = 0.04
DEVIATION_DECAY_PER_MATCH: float = 0.05
DEVIATION_SURPRISE_WEIGHT: float = 0.1
VOLATILITY_SURPRISE_WEIGHT: float = 0.005

# Expected per-outcome point deltas before difficulty scaling
BASE_WIN_DELTA: int = 15
BASE_LOSS_DELTA: int = -12
BASE_DRAW_DELTA: int = 2

# difficulty multiplier = clamp(reference / rating, min, max)
DIFFICULTY_REFERENCE_RATING: float = 1800.0
MIN_DIFFICULTY_MULTIPLIER: float = 0.5
MAX_DIFFICULTY_MULTIPLIER: float = 2.0

SURPRISE_SCALE: float = 20.0

WIN_RATING_FACTOR: float = 0.8
LOSS_RATING_FACTOR: float = 0.8
DRAW_RATING_FACTOR: float = 0.5
MIN_WIN_RATING_GAIN: float = 5.0
MIN_LOSS_RATING_DROP: float = -5.0

# =============================================================================
# Demotion Shield
# =============================================================================

# Internal delta applied for a shielded loss whose displayed delta is 0
SHIELDED_LOSS_DELTA: int = -12
MAX_SHIELD_GAMES: int = 3
SHIELD_WARNING_GAMES: int = 2

# =============================================================================
# Counter Prediction Parameters
# =============================================================================

DEFAULT_K_FACTOR: float = 32.0
LOGISTIC_SCALE: float = 400.0
SYMMETRY_TOLERANCE: int = 5

# =============================================================================
# Progression Simulation Parameters
# =============================================================================

MIN_SIMULATION_GAMES: int = 1
MAX_SIMULATION_GAMES: int = 100
DIMINISHING_RETURN_DIVISOR: float = 2000.0
DIMINISHING_RETURN_EPSILON: float = 1e-3
MIN_STEP_MAGNITUDE: int = 1

# =============================================================================
# Rating Alignment
# =============================================================================

ALIGNMENT_TOLERANCE: float = 50.0
STRONG_MISALIGNMENT: float = 100.0
PROJECTION_MULTIPLIERS: dict[str, float] = {
    "strong_above": 1.3,
    "above": 1.15,
    "below": 0.85,
    "strong_below": 0.7,
}

# =============================================================================
# Confidence Scoring
# =============================================================================

SAMPLE_SIZE_POINTS: tuple[tuple[int, int], ...] = ((8, 40), (5, 30), (3, 20))
SAMPLE_SIZE_FLOOR_POINTS: int = 10

LOW_VARIANCE_THRESHOLD: float = 25.0
MEDIUM_VARIANCE_THRESHOLD: float = 50.0
VARIANCE_POINTS: tuple[int, int, int] = (30, 20, 10)

RECENCY_ESTABLISHED_POINTS: int = 15
RECENCY_NEW_SEASON_POINTS: int = 10

MIN_MATCHES_FOR_WIN_RATE: int = 5
WIN_RATE_TIGHT_BAND: tuple[float, float] = (0.4, 0.7)
WIN_RATE_WIDE_BAND: tuple[float, float] = (0.3, 0.8)
WIN_RATE_POINTS: tuple[int, int, int] = (15, 10, 5)

SEASON_CONTEXT_PENALTY: int = 10
SHIELD_SAMPLE_BONUS: int = 5

# Samples below this size are capped so they can never leave the Low band
MIN_MATCHES_FOR_UNCAPPED_SCORE: int = 3
SMALL_SAMPLE_SCORE_CAP: int = 45

MEDIUM_CONFIDENCE_THRESHOLD: int = 50
HIGH_CONFIDENCE_THRESHOLD: int = 75
