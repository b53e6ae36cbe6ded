import logging

import pytest

from ladder.core.tiers import RankPosition
from ladder.rating.history import MatchRecord, Outcome


@pytest.fixture(autouse=True)
def reset_ladder_logger():
    """setup_logging() stops propagation; restore it so caplog keeps working."""
    yield
    logger = logging.getLogger("ladder")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def gold_one_half() -> RankPosition:
    """Gold 1 with 50 display points (baseline 1700, interpolates to 1750)."""
    return RankPosition(8, 50)


@pytest.fixture
def steady_matches() -> list[MatchRecord]:
    """Eight matches, four wins, low delta variance."""
    return [
        MatchRecord(Outcome.WIN, 15),
        MatchRecord(Outcome.LOSS, -12),
        MatchRecord(Outcome.WIN, 16),
        MatchRecord(Outcome.LOSS, -13),
        MatchRecord(Outcome.WIN, 14),
        MatchRecord(Outcome.LOSS, -12),
        MatchRecord(Outcome.WIN, 15),
        MatchRecord(Outcome.LOSS, -14),
    ]


@pytest.fixture
def match_rows() -> list[dict]:
    """Collaborator-shaped rows, newest first."""
    return [
        {"outcome": "loss", "rp_change": 0, "was_shielded": True, "created_at": "2025-03-04T10:00:00"},
        {"outcome": "win", "rp_change": 18, "was_shielded": False, "created_at": "2025-03-03T10:00:00"},
        {"outcome": "loss", "rp_change": -11, "was_shielded": False, "created_at": "2025-03-02T10:00:00"},
        {"outcome": "draw", "rp_change": 2, "was_shielded": False, "created_at": "2025-03-01T10:00:00"},
    ]
