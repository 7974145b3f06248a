"""Standings engine: championship ordering and champion classification."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from titlefight.calculator import compute_result
from titlefight.models.contender import Contender
from titlefight.models.result import EnrichedResult, StandingsOutcome


def standings_key(result: EnrichedResult) -> tuple[int, int, int, str]:
    """Sort key: points, wins, podiums (all descending), then name ascending."""
    return (-result.final_points, -result.final_wins, -result.final_podiums, result.name)


def rank(results: Iterable[EnrichedResult]) -> list[EnrichedResult]:
    """Return results in championship order. The input is left untouched."""
    return sorted(results, key=standings_key)


def classify(ranked: list[EnrichedResult]) -> StandingsOutcome:
    """Pick champion and runner-up from ranked results and flag a dead heat.

    A tie means the top two are level on points, wins and podiums; the name
    fallback in :func:`standings_key` orders them for display only.
    """
    champion = ranked[0] if ranked else None
    second = ranked[1] if len(ranked) > 1 else None

    if champion is None or second is None:
        return StandingsOutcome(
            standings=tuple(ranked), champion=champion, second=None, is_tie=False,
        )

    return StandingsOutcome(
        standings=tuple(ranked),
        champion=champion,
        second=second,
        is_tie=champion.totals() == second.totals(),
    )


def simulate(
    roster: Iterable[Contender],
    finishes: Mapping[str, int | None],
) -> StandingsOutcome:
    """Run a what-if race over the whole roster.

    ``finishes`` maps contender id to finishing position; anyone missing
    from the mapping scores nothing.
    """
    results = [compute_result(c, finishes.get(c.id)) for c in roster]
    return classify(rank(results))
