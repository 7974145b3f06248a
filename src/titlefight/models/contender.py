"""Roster entrant model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class Contender(BaseModel):
    """A driver's championship totals going into the final race."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    team: str = ""
    points: NonNegativeInt = 0
    wins: NonNegativeInt = 0
    podiums: NonNegativeInt = 0
    is_contender: bool = False
