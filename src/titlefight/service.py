"""Championship service: the request/response entry points for callers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from titlefight._logging import log_service_call
from titlefight.models.contender import Contender
from titlefight.models.result import StandingsOutcome
from titlefight.models.scenario import Scenario, ScenarioGroup
from titlefight.roster import tracked_contenders
from titlefight.scenarios import find_winning_scenarios, group_scenarios
from titlefight.standings import simulate


class ChampionshipService:
    """Wraps a fixed roster and answers what-if and strategy requests."""

    def __init__(self, roster: Iterable[Contender]) -> None:
        self._roster: tuple[Contender, ...] = tuple(roster)

    @property
    def roster(self) -> tuple[Contender, ...]:
        return self._roster

    @property
    def contenders(self) -> list[Contender]:
        return tracked_contenders(self._roster)

    @log_service_call
    def simulate(self, finishes: Mapping[str, int | None]) -> StandingsOutcome:
        """Rank the whole roster after one hypothetical race."""
        return simulate(self._roster, finishes)

    @log_service_call
    def winning_scenarios(self, target_id: str) -> list[Scenario]:
        """Every tracked-contender finish combination that crowns ``target_id``."""
        return find_winning_scenarios(target_id, self._roster)

    @log_service_call
    def strategy(self, target_id: str) -> list[ScenarioGroup]:
        """Winning scenarios for ``target_id`` summarised per target finish.

        Returns an empty list when no finish can win the title outright.
        """
        scenarios = find_winning_scenarios(target_id, self._roster)
        return group_scenarios(target_id, scenarios, self._roster)
