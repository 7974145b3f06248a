"""Scenario search value objects."""

from __future__ import annotations

from dataclasses import dataclass

from titlefight.constants import SCORING_POSITIONS


def position_label(position: int | None) -> str:
    """Return "P<n>" for a scoring finish, "No Points" otherwise."""
    if position is None or not 1 <= position <= SCORING_POSITIONS:
        return "No Points"
    return f"P{position}"


@dataclass(frozen=True)
class Scenario:
    """One assignment of finishing positions to the tracked contenders.

    ``finishes`` holds ``(contender_id, position)`` pairs in roster order.
    """

    finishes: tuple[tuple[str, int], ...]

    def position_of(self, contender_id: str) -> int:
        for cid, position in self.finishes:
            if cid == contender_id:
                return position
        raise KeyError(contender_id)

    def as_dict(self) -> dict[str, int]:
        return dict(self.finishes)


@dataclass(frozen=True)
class RivalConstraint:
    """Best finish a rival may reach while the target still wins."""

    contender_id: str
    name: str
    best_position: int

    @property
    def description(self) -> str:
        return f"{self.name} finishes {position_label(self.best_position)} or lower"


@dataclass(frozen=True)
class ScenarioGroup:
    """Winning scenarios sharing one target finishing position."""

    position: int
    constraints: tuple[RivalConstraint, ...]
    scenario_count: int

    @property
    def label(self) -> str:
        return position_label(self.position)

    @property
    def description(self) -> str:
        return " AND ".join(c.description for c in self.constraints)
