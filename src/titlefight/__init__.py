"""titlefight — championship-decider standings and scenario search."""

from titlefight.calculator import compute_result, race_points_for
from titlefight.constants import NO_POINTS, RACE_POINTS, SCORING_POSITIONS
from titlefight.exceptions import (
    ContenderCountError,
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1Error,
    OpenF1TimeoutError,
    OpenF1ValidationError,
    RosterError,
    TitleFightError,
    UnknownContenderError,
)
from titlefight.models import (
    Contender,
    EnrichedResult,
    RivalConstraint,
    Scenario,
    ScenarioGroup,
    StandingsOutcome,
    position_label,
)
from titlefight.roster import (
    get_contender,
    load_roster,
    loads_roster,
    parse_roster,
    sample_roster,
    tracked_contenders,
)
from titlefight.scenarios import find_winning_scenarios, group_scenarios, iter_winning_scenarios
from titlefight.service import ChampionshipService
from titlefight.standings import classify, rank, simulate

__all__ = [
    "NO_POINTS",
    "RACE_POINTS",
    "SCORING_POSITIONS",
    "ChampionshipService",
    "Contender",
    "ContenderCountError",
    "EnrichedResult",
    "OpenF1APIError",
    "OpenF1ConnectionError",
    "OpenF1Error",
    "OpenF1TimeoutError",
    "OpenF1ValidationError",
    "RivalConstraint",
    "RosterError",
    "Scenario",
    "ScenarioGroup",
    "StandingsOutcome",
    "TitleFightError",
    "UnknownContenderError",
    "classify",
    "compute_result",
    "find_winning_scenarios",
    "get_contender",
    "group_scenarios",
    "iter_winning_scenarios",
    "load_roster",
    "loads_roster",
    "parse_roster",
    "position_label",
    "race_points_for",
    "rank",
    "sample_roster",
    "simulate",
    "tracked_contenders",
]

__version__ = "0.1.0"
