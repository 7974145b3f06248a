"""Scenario explorer: exhaustive title-decider search and its summary.

The search sweeps every finishing position (P1..P10 plus ``NO_POINTS``) for
each of the three tracked contenders, skips physically impossible
combinations, and keeps those where the target ends up sole champion.

Grouping then buckets the winners by the target's own finish and reduces
each bucket to one "finishes Px or lower" line per rival, using the best
position that rival reaches anywhere in the bucket.  That reduction is a
heuristic: it assumes any worse finish for a rival also works, which holds
for a points table that never rewards a lower position, but it can
overstate the allowed range where the collision rule removes particular
combinations.  It is not an exact (Pareto-minimal) constraint solver.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence

from titlefight.calculator import compute_result
from titlefight.constants import NO_POINTS, SCORING_POSITIONS, TRACKED_CONTENDERS
from titlefight.exceptions import ContenderCountError, UnknownContenderError
from titlefight.models.contender import Contender
from titlefight.models.scenario import RivalConstraint, Scenario, ScenarioGroup, position_label
from titlefight.roster import tracked_contenders
from titlefight.standings import classify, rank

SWEEP_POSITIONS: tuple[int, ...] = tuple(range(1, NO_POINTS + 1))

__all__ = [
    "SWEEP_POSITIONS",
    "find_winning_scenarios",
    "group_scenarios",
    "iter_winning_scenarios",
    "position_label",
    "summarise_constraints",
]


def _collides(positions: Sequence[int]) -> bool:
    """True if two contenders share a scoring position."""
    scoring = [p for p in positions if 1 <= p <= SCORING_POSITIONS]
    return len(scoring) != len(set(scoring))


def _split_field(
    target_id: str, roster: Iterable[Contender],
) -> tuple[list[Contender], Contender, list[Contender]]:
    """Return (tracked contenders, target, rivals) or raise on a bad setup."""
    contenders = tracked_contenders(roster)
    if len(contenders) != TRACKED_CONTENDERS:
        raise ContenderCountError(TRACKED_CONTENDERS, len(contenders))

    target = next((c for c in contenders if c.id == target_id), None)
    if target is None:
        raise UnknownContenderError(target_id)

    rivals = [c for c in contenders if c.id != target_id]
    return contenders, target, rivals


def iter_winning_scenarios(
    target_id: str, roster: Iterable[Contender],
) -> Iterator[Scenario]:
    """Yield every combination in which ``target_id`` is sole champion.

    Order: target position ascending, then each rival (roster order)
    ascending.  Scenarios list finishes in roster order.  Ties are never
    yielded, even when the tied target ranks first on name.
    """
    contenders, target, rivals = _split_field(target_id, roster)
    sweep_order = [target, *rivals]

    for positions in itertools.product(SWEEP_POSITIONS, repeat=len(sweep_order)):
        if _collides(positions):
            continue

        assignment = {c.id: pos for c, pos in zip(sweep_order, positions)}
        outcome = classify(rank(compute_result(c, assignment[c.id]) for c in contenders))

        if outcome.is_clean_win and outcome.champion.id == target_id:
            yield Scenario(finishes=tuple((c.id, assignment[c.id]) for c in contenders))


def find_winning_scenarios(
    target_id: str, roster: Iterable[Contender],
) -> list[Scenario]:
    """Return all winning scenarios for ``target_id``; empty if none exist."""
    return list(iter_winning_scenarios(target_id, roster))


def summarise_constraints(
    scenarios: Sequence[Scenario],
    rivals: Sequence[tuple[str, str]],
) -> tuple[RivalConstraint, ...]:
    """Reduce a bucket to the best position each rival reaches in it.

    ``rivals`` is a sequence of ``(contender_id, display_name)`` pairs.
    """
    return tuple(
        RivalConstraint(
            contender_id=rival_id,
            name=name,
            best_position=min(sc.position_of(rival_id) for sc in scenarios),
        )
        for rival_id, name in rivals
    )


def _display_name(contender_id: str, names: dict[str, str]) -> str:
    if contender_id in names:
        return names[contender_id]
    return contender_id[:1].upper() + contender_id[1:]


def group_scenarios(
    target_id: str,
    scenarios: Sequence[Scenario],
    roster: Iterable[Contender] | None = None,
) -> list[ScenarioGroup]:
    """Bucket winning scenarios by the target's finish and summarise each.

    Groups come out in ascending target position with ``NO_POINTS`` last.
    Rival names are looked up in ``roster`` when given.
    """
    if not scenarios:
        return []

    if target_id not in scenarios[0].as_dict():
        raise UnknownContenderError(target_id)

    names = {c.id: c.name for c in roster} if roster is not None else {}
    rivals = [
        (cid, _display_name(cid, names))
        for cid, _ in scenarios[0].finishes
        if cid != target_id
    ]

    buckets: dict[int, list[Scenario]] = {}
    for sc in scenarios:
        buckets.setdefault(sc.position_of(target_id), []).append(sc)

    return [
        ScenarioGroup(
            position=position,
            constraints=summarise_constraints(buckets[position], rivals),
            scenario_count=len(buckets[position]),
        )
        for position in sorted(buckets)
    ]
