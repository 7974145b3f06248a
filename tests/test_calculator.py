"""Tests for titlefight/calculator.py — race points and enriched results."""

from __future__ import annotations

import pytest

from titlefight.calculator import compute_result, race_points_for
from titlefight.constants import NO_POINTS, RACE_POINTS


class TestRacePointsFor:
    @pytest.mark.parametrize("position,points", sorted(RACE_POINTS.items()))
    def test_scoring_zone(self, position, points):
        assert race_points_for(position) == points

    @pytest.mark.parametrize("position", [None, 0, -1, 11, NO_POINTS, 20, 21])
    def test_outside_scoring_zone(self, position):
        assert race_points_for(position) == 0

    def test_table_is_non_increasing(self):
        values = [RACE_POINTS[p] for p in sorted(RACE_POINTS)]
        assert values == sorted(values, reverse=True)


class TestComputeResult:
    def test_win(self, make_contender):
        res = compute_result(make_contender("A", points=350, wins=5, podiums=10), 1)
        assert res.race_points == 25
        assert res.final_points == 375
        assert res.final_wins == 6
        assert res.final_podiums == 11

    def test_second_place_is_podium_not_win(self, make_contender):
        res = compute_result(make_contender("A", points=350, wins=5, podiums=10), 2)
        assert res.final_points == 368
        assert res.final_wins == 5
        assert res.final_podiums == 11

    def test_third_is_last_podium(self, make_contender):
        third = compute_result(make_contender("A", podiums=4), 3)
        fourth = compute_result(make_contender("A", podiums=4), 4)
        assert third.final_podiums == 5
        assert fourth.final_podiums == 4

    def test_no_points_keeps_totals(self, make_contender):
        res = compute_result(make_contender("A", points=100, wins=2, podiums=3), None)
        assert res.finish is None
        assert res.race_points == 0
        assert res.totals() == (100, 2, 3)

    def test_non_scoring_position_preserved(self, make_contender):
        res = compute_result(make_contender("A", points=100), 14)
        assert res.finish == 14
        assert res.race_points == 0
        assert res.final_points == 100

    @pytest.mark.parametrize("position", [0, -3])
    def test_nonsense_positions_degrade_to_no_points(self, make_contender, position):
        res = compute_result(make_contender("A", points=10, wins=1, podiums=1), position)
        assert res.totals() == (10, 1, 1)

    def test_copies_contender_fields(self, make_contender):
        c = make_contender("A", points=1, wins=2, podiums=3, name="Alpha", team="Red")
        res = compute_result(c, 5)
        assert (res.id, res.name, res.team) == ("A", "Alpha", "Red")
        assert (res.points, res.wins, res.podiums) == (1, 2, 3)
        assert res.is_contender is True

    def test_contender_unchanged(self, make_contender):
        c = make_contender("A", points=50)
        compute_result(c, 1)
        assert c.points == 50

    def test_totals_never_decrease(self, make_contender):
        c = make_contender("A", points=50, wins=1, podiums=2)
        for position in [None, *range(-1, 23)]:
            res = compute_result(c, position)
            assert res.final_points >= c.points
            assert res.final_wins >= c.wins
            assert res.final_podiums >= c.podiums
