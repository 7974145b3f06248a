"""Result calculator: one contender plus one hypothetical finish."""

from __future__ import annotations

from titlefight.constants import PODIUM_POSITIONS, RACE_POINTS
from titlefight.models.contender import Contender
from titlefight.models.result import EnrichedResult


def race_points_for(position: int | None) -> int:
    """Return race points for a finishing position, 0 outside the scoring zone."""
    if position is None:
        return 0
    return RACE_POINTS.get(position, 0)


def compute_result(contender: Contender, finish: int | None) -> EnrichedResult:
    """Apply a hypothetical finish to a contender's pre-race totals.

    ``finish`` may be ``None`` or any integer; positions outside P1..P10
    score nothing but are kept on the result as entered.
    """
    race_points = race_points_for(finish)
    return EnrichedResult(
        id=contender.id,
        name=contender.name,
        team=contender.team,
        points=contender.points,
        wins=contender.wins,
        podiums=contender.podiums,
        is_contender=contender.is_contender,
        finish=finish,
        race_points=race_points,
        final_points=contender.points + race_points,
        final_wins=contender.wins + (1 if finish == 1 else 0),
        final_podiums=contender.podiums + (1 if finish in PODIUM_POSITIONS else 0),
    )
