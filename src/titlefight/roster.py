"""Roster input: load, validate and query the pre-race championship table."""

from __future__ import annotations

from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from titlefight.exceptions import RosterError, UnknownContenderError
from titlefight.models.contender import Contender

SAMPLE_ROSTER_FILE = "roster_2025.json"

_ROSTER_ADAPTER = TypeAdapter(list[Contender])


def parse_roster(data: list[dict[str, Any]]) -> list[Contender]:
    """Validate a list of dicts into contenders."""
    try:
        roster = _ROSTER_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise RosterError(f"Failed to validate roster: {exc}") from exc
    _check_unique_ids(roster)
    return roster


def load_roster(path: str | Path) -> list[Contender]:
    """Read a JSON roster file (a list of contender objects)."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise RosterError(f"Cannot read roster file {path}: {exc}") from exc
    return loads_roster(raw)


def loads_roster(raw: str | bytes) -> list[Contender]:
    """Parse a JSON roster document."""
    try:
        roster = _ROSTER_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise RosterError(f"Failed to validate roster: {exc}") from exc
    _check_unique_ids(roster)
    return roster


def sample_roster() -> list[Contender]:
    """Return the bundled roster for the 2025 season finale."""
    raw = resources.files("titlefight").joinpath("data", SAMPLE_ROSTER_FILE).read_bytes()
    return loads_roster(raw)


def tracked_contenders(roster: Iterable[Contender]) -> list[Contender]:
    """Return the entrants flagged as part of the title fight, in roster order."""
    return [c for c in roster if c.is_contender]


def get_contender(roster: Iterable[Contender], contender_id: str) -> Contender:
    for c in roster:
        if c.id == contender_id:
            return c
    raise UnknownContenderError(contender_id)


def _check_unique_ids(roster: list[Contender]) -> None:
    seen: set[str] = set()
    for c in roster:
        if c.id in seen:
            raise RosterError(f"Duplicate contender id {c.id!r} in roster")
        seen.add(c.id)
