"""Tests for titlefight/service.py."""

from __future__ import annotations

import pytest

from titlefight.exceptions import UnknownContenderError
from titlefight.models.result import StandingsOutcome
from titlefight.service import ChampionshipService


@pytest.fixture
def service(finale_roster, service_log_dir):
    return ChampionshipService(finale_roster)


class TestChampionshipService:
    def test_contenders(self, service):
        assert [c.id for c in service.contenders] == ["norris", "verstappen", "piastri"]
        assert len(service.roster) == 4

    def test_simulate(self, service):
        outcome = service.simulate({"verstappen": 1, "norris": 4, "piastri": 2})
        assert isinstance(outcome, StandingsOutcome)
        assert outcome.champion.id == "verstappen"
        assert outcome.champion.final_points == 421
        assert outcome.second.id == "norris"
        assert outcome.is_tie is False

    def test_winning_scenarios(self, service):
        scenarios = service.winning_scenarios("piastri")
        assert {sc.position_of("piastri") for sc in scenarios} == {1, 2}

    def test_strategy(self, service):
        groups = service.strategy("verstappen")
        assert [g.label for g in groups] == ["P1", "P2", "P3"]

    def test_strategy_unknown_target(self, service, service_log_dir):
        with pytest.raises(UnknownContenderError):
            service.strategy("russell")
        content = (service_log_dir / "service_calls.log").read_text()
        assert "SERVICE FAIL: ChampionshipService.strategy" in content
        assert "UnknownContenderError" in content

    def test_calls_are_logged(self, service, service_log_dir):
        service.strategy("norris")
        content = (service_log_dir / "service_calls.log").read_text()
        assert "SERVICE CALL: ChampionshipService.strategy('norris')" in content
        assert "SERVICE OK: ChampionshipService.strategy('norris') -> 11 items" in content
