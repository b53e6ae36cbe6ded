"""Probability and scaling transformations shared by the rating components.

This module implements the logistic expected-score model used by the counter
predictor and the difficulty scaling used by the rating estimator.
"""

from __future__ import annotations

import math

from ladder.core.constants import (
    DIFFICULTY_REFERENCE_RATING,
    LOGISTIC_SCALE,
    MAX_DIFFICULTY_MULTIPLIER,
    MIN_DIFFICULTY_MULTIPLIER,
)


def expected_score(
    rating_a: float,
    rating_b: float,
    *,
    scale: float = LOGISTIC_SCALE,
) -> float:
    """
    Logistic expected score of A against B.

    Parameters
    ----------
    rating_a, rating_b : float
        Ratings on the baseline-table scale.
    scale : float, optional
        Rating difference that corresponds to 10:1 odds.

    Returns
    -------
    float
        Probability that A beats B. ``expected_score(a, b)`` and
        ``expected_score(b, a)`` always sum to 1.

    Examples
    --------
    >>> expected_score(1500, 1500)
    0.5
    >>> round(expected_score(1900, 1500), 4)
    0.9091
    """
    return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / scale))


def difficulty_multiplier(
    rating: float,
    *,
    reference: float = DIFFICULTY_REFERENCE_RATING,
    lower: float = MIN_DIFFICULTY_MULTIPLIER,
    upper: float = MAX_DIFFICULTY_MULTIPLIER,
) -> float:
    """
    Scale factor applied to expected point deltas at a given rating.

    ``clamp(reference / rating, lower, upper)``. A rating of exactly 0 maps
    to ``upper`` and negative ratings map to ``lower``, which is where the
    unclamped ratio diverges to.
    """
    if rating == 0:
        return upper
    if rating < 0:
        return lower
    return max(lower, min(upper, reference / rating))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Point deltas are reported with this rule (``-2.5 -> -2``, ``2.5 -> 3``)
    rather than Python's round-half-even.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
