"""Formatting helpers for the title fight dashboard."""

from __future__ import annotations

from titlefight import EnrichedResult, ScenarioGroup, StandingsOutcome

from .constants import NO_POINTS_OPTION_LABEL


def format_finish(finish: int | None) -> str:
    """Format a manual finish as P<n>, keeping non-scoring positions as entered."""
    if finish is None:
        return NO_POINTS_OPTION_LABEL
    return f"P{finish}"


def champion_banner(outcome: StandingsOutcome) -> str:
    """Markdown summary of a what-if outcome: champion, or a dead-heat tie."""
    champion = outcome.champion
    if champion is None:
        return ""
    if outcome.is_tie and outcome.second is not None:
        return (
            f"**Tie** on points/wins/podiums between **{champion.name}** and "
            f"**{outcome.second.name}** ({champion.final_points} pts)."
        )
    return (
        f"**Champion:** **{champion.name}** ({champion.team}) with "
        f"**{champion.final_points}** points "
        f"(wins: {champion.final_wins}, podiums: {champion.final_podiums})."
    )


def standings_rows(outcome: StandingsOutcome) -> list[dict]:
    """Table rows for the ranked standings, one dict per driver."""
    rows: list[dict] = []
    for rank, res in enumerate(outcome.standings, start=1):
        rows.append({
            "Rank": rank,
            "Driver": res.name,
            "Team": res.team,
            "Points": res.points,
            "Wins": res.wins,
            "Podiums": res.podiums,
            "Finish": format_finish(res.finish),
            "Race Pts": res.race_points,
            "Final Pts": res.final_points,
            "Final Wins": res.final_wins,
            "Final Podiums": res.final_podiums,
        })
    return rows


def is_champion_row(outcome: StandingsOutcome, result: EnrichedResult) -> bool:
    """True for the row to highlight: the sole champion only, never a tie."""
    return outcome.is_clean_win and outcome.champion is not None and outcome.champion.id == result.id


def scenario_heading(target_name: str, group: ScenarioGroup) -> str:
    return f"If {target_name} finishes **{group.label}**"


def no_scenarios_message(target_name: str) -> str:
    return f"No scenarios found where {target_name} wins the title outright."
