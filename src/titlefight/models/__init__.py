"""Title fight data models."""

from titlefight.models.contender import Contender
from titlefight.models.result import EnrichedResult, StandingsOutcome
from titlefight.models.scenario import RivalConstraint, Scenario, ScenarioGroup, position_label

__all__ = [
    "Contender",
    "EnrichedResult",
    "RivalConstraint",
    "Scenario",
    "ScenarioGroup",
    "StandingsOutcome",
    "position_label",
]
