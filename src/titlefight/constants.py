"""Championship rules shared by the calculator, standings and scenario search."""

from __future__ import annotations

# Points for a Grand Prix finish, P1..P10
RACE_POINTS: dict[int, int] = {
    1: 25,
    2: 18,
    3: 15,
    4: 12,
    5: 10,
    6: 8,
    7: 6,
    8: 4,
    9: 2,
    10: 1,
}

SCORING_POSITIONS = len(RACE_POINTS)
PODIUM_POSITIONS = frozenset({1, 2, 3})

# "11th or worse / DNF" in the scenario sweep
NO_POINTS = SCORING_POSITIONS + 1

TRACKED_CONTENDERS = 3
