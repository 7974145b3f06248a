"""Per-race result and standings value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EnrichedResult:
    """A contender's totals after one hypothetical finish."""

    id: str
    name: str
    team: str
    points: int
    wins: int
    podiums: int
    is_contender: bool
    finish: int | None
    race_points: int
    final_points: int
    final_wins: int
    final_podiums: int

    def totals(self) -> tuple[int, int, int]:
        """Return (final_points, final_wins, final_podiums)."""
        return (self.final_points, self.final_wins, self.final_podiums)


@dataclass(frozen=True)
class StandingsOutcome:
    """Ranked standings plus the champion / runner-up / tie classification."""

    standings: tuple[EnrichedResult, ...]
    champion: EnrichedResult | None
    second: EnrichedResult | None
    is_tie: bool

    @property
    def is_clean_win(self) -> bool:
        return self.champion is not None and not self.is_tie
