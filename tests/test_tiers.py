"""Tests for the tier enumeration, rank names and the total-points codec."""

import pytest

from ladder.core.constants import BASELINE_RATINGS, LADDER_SIZE
from ladder.core.tiers import (
    LADDER,
    RankPosition,
    Tier,
    from_total_points,
    is_valid_total_points,
    ladder_index,
    next_rank,
    parse_rank,
    points_to_next_rank,
    rank_change_description,
    rung,
    to_total_points,
)


class TestLadderLayout:
    def test_twenty_one_rungs(self):
        assert len(LADDER) == LADDER_SIZE == 21
        assert len(BASELINE_RATINGS) == 21

    def test_baselines_non_decreasing(self):
        assert all(a <= b for a, b in zip(BASELINE_RATINGS, BASELINE_RATINGS[1:]))

    def test_tier_first_indices(self):
        assert Tier.BRONZE.first_index == 0
        assert Tier.SILVER.first_index == 4
        assert Tier.GOLD.first_index == 8
        assert Tier.PLATINUM.first_index == 12
        assert Tier.DIAMOND.first_index == 16
        assert Tier.EMERALD.first_index == 19
        assert Tier.NIGHTMARE.first_index == 20

    def test_single_division_tiers(self):
        assert not Tier.EMERALD.has_levels
        assert not Tier.NIGHTMARE.has_levels
        assert Tier.DIAMOND.divisions == 3

    def test_decompose_recompose_identity(self):
        for index in range(21):
            tier, division = rung(index)
            assert ladder_index(tier, division) == index

    def test_tier_parse_case_insensitive(self):
        assert Tier.parse("gold") is Tier.GOLD
        assert Tier.parse(" NIGHTMARE ") is Tier.NIGHTMARE

    def test_unknown_tier_rejected(self):
        with pytest.raises(ValueError, match="Unknown tier"):
            Tier.parse("Mythic")

    def test_division_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            ladder_index(Tier.DIAMOND, 4)
        with pytest.raises(ValueError):
            ladder_index("Gold", 0)

    def test_index_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            rung(21)
        with pytest.raises(ValueError):
            rung(-1)


class TestRankPosition:
    def test_round_trip_through_totals(self):
        for index in range(21):
            for points in range(100):
                position = RankPosition(index, points)
                assert from_total_points(to_total_points(position)) == position

    def test_display_points_of_100_not_representable(self):
        with pytest.raises(ValueError):
            RankPosition(5, 100)

    def test_negative_points_rejected(self):
        with pytest.raises(ValueError):
            RankPosition(5, -1)

    def test_bool_index_rejected(self):
        with pytest.raises(ValueError):
            RankPosition(True, 0)

    def test_nightmare_pool_unbounded(self):
        position = RankPosition(20, 350)
        assert position.display_points == 350
        assert position.reported_points == 99
        assert position.is_terminal

    @pytest.mark.parametrize(
        "index, name",
        [(0, "Bronze 1"), (9, "Gold 2"), (18, "Diamond 3"), (19, "Emerald"), (20, "Nightmare")],
    )
    def test_display_name(self, index, name):
        assert RankPosition(index).display_name == name

    def test_sort_key(self):
        assert RankPosition(9).sort_key == 3002
        assert RankPosition(18).sort_key == 5003
        assert RankPosition(19).sort_key == 6000
        assert RankPosition(20).sort_key == 7000

    def test_str(self):
        assert str(RankPosition(9, 42)) == "Gold 2 (42 RP)"

    def test_from_rank_and_name(self):
        assert RankPosition.from_rank("Silver", 2, 95) == RankPosition(5, 95)
        assert RankPosition.from_name("Gold 1", 50) == RankPosition(8, 50)


class TestParseRank:
    @pytest.mark.parametrize(
        "name, index",
        [
            ("Gold 2", 9),
            ("GOLD_2", 9),
            ("gold2", 9),
            ("Emerald", 19),
            ("EMERALD_1", 19),
            ("Nightmare", 20),
            ("Bronze 1", 0),
        ],
    )
    def test_accepted_names(self, name, index):
        assert parse_rank(name) == index

    @pytest.mark.parametrize("name", ["Gold", "Diamond 4", "Mythic 1", "", "2 Gold"])
    def test_rejected_names(self, name):
        with pytest.raises(ValueError):
            parse_rank(name)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError):
            parse_rank(9)


class TestTotalPoints:
    @pytest.mark.parametrize(
        "total, index, points",
        [
            (0, 0, 0),
            (850, 8, 50),
            (1900, 19, 0),
            (1999, 19, 99),
            (2000, 20, 0),
            (2350, 20, 350),
        ],
    )
    def test_from_total_points(self, total, index, points):
        assert from_total_points(total) == RankPosition(index, points)

    def test_negative_total_clamps_to_zero(self):
        assert from_total_points(-40) == RankPosition(0, 0)

    def test_to_total_points(self):
        assert to_total_points(RankPosition(20, 350)) == 2350
        assert RankPosition(8, 50).total_points == 850

    @pytest.mark.parametrize(
        "total, valid",
        [(0, True), (10_000, True), (10_001, False), (-1, False), (True, False), (5.0, False)],
    )
    def test_is_valid_total_points(self, total, valid):
        assert is_valid_total_points(total) is valid


class TestRankNavigation:
    def test_next_rank(self):
        assert next_rank(RankPosition(18)) == (Tier.EMERALD, 1)
        assert next_rank(RankPosition(20)) is None

    def test_points_to_next_rank(self):
        assert points_to_next_rank(RankPosition(8, 30)) == 70
        assert points_to_next_rank(RankPosition(20, 500)) == 0

    def test_rank_change_description(self):
        assert (
            rank_change_description(RankPosition(7, 90), RankPosition(8, 5))
            == "Promoted from Silver 4 to Gold 1"
        )
        assert (
            rank_change_description(RankPosition(8, 5), RankPosition(7, 90))
            == "Demoted from Gold 1 to Silver 4"
        )
        assert (
            rank_change_description(RankPosition(8, 5), RankPosition(8, 20))
            == "Progressed in Gold 1"
        )
