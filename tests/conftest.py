"""Shared test fixtures and sample data."""

from __future__ import annotations

import logging

import pytest

from titlefight import Contender

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_SESSIONS = [
    {"session_key": 100, "meeting_key": 10, "session_name": "Race", "session_type": "Race", "year": 2025,
     "date_start": "2025-11-23T04:00:00+00:00"},
    {"session_key": 200, "meeting_key": 20, "session_name": "Race", "session_type": "Race", "year": 2025,
     "date_start": "2025-11-30T16:00:00+00:00"},
    {"session_key": 300, "meeting_key": 30, "session_name": "Race", "session_type": "Race", "year": 2025,
     "date_start": "2025-12-07T13:00:00+00:00"},
]

SAMPLE_RESULTS = {
    100: [
        {"session_key": 100, "driver_number": 4, "position": 1, "points": 25.0},
        {"session_key": 100, "driver_number": 1, "position": 2, "points": 18.0},
        {"session_key": 100, "driver_number": 81, "position": 3, "points": 15.0},
        {"session_key": 100, "driver_number": 63, "position": 4, "points": 12.0},
        {"session_key": 100, "driver_number": 44, "position": None, "dsq": True, "points": 0.0},
    ],
    200: [
        {"session_key": 200, "driver_number": 1, "position": 1, "points": 25.0},
        {"session_key": 200, "driver_number": 81, "position": 2, "points": 18.0},
        {"session_key": 200, "driver_number": 4, "position": 3, "points": 15.0},
        {"session_key": 200, "driver_number": 63, "position": 4, "points": 12.0},
        {"session_key": 200, "driver_number": 44, "position": 5, "points": 10.0},
    ],
}

SAMPLE_CHAMPIONSHIP = [
    {"session_key": 200, "meeting_key": 20, "driver_number": 1, "points_current": 43.0, "position_current": 2},
    {"session_key": 200, "meeting_key": 20, "driver_number": 4, "points_current": 50.0, "position_current": 1},
    {"session_key": 200, "meeting_key": 20, "driver_number": 63, "points_current": 24.0, "position_current": 4},
    {"session_key": 200, "meeting_key": 20, "driver_number": 81, "points_current": 33.0, "position_current": 3},
    {"session_key": 200, "meeting_key": 20, "driver_number": 44, "points_current": 10.0, "position_current": 5},
]

SAMPLE_DRIVERS = [
    {"driver_number": 1, "first_name": "Max", "last_name": "Verstappen", "full_name": "Max VERSTAPPEN",
     "name_acronym": "VER", "team_name": "Red Bull Racing", "session_key": 200},
    {"driver_number": 4, "first_name": "Lando", "last_name": "Norris", "full_name": "Lando NORRIS",
     "name_acronym": "NOR", "team_name": "McLaren", "session_key": 200},
    {"driver_number": 63, "first_name": "George", "last_name": "Russell", "full_name": "George RUSSELL",
     "name_acronym": "RUS", "team_name": "Mercedes", "session_key": 200},
    {"driver_number": 81, "first_name": "Oscar", "last_name": "Piastri", "full_name": "Oscar PIASTRI",
     "name_acronym": "PIA", "team_name": "McLaren", "session_key": 200},
]


def _make_contender(
    contender_id: str,
    points: int = 0,
    wins: int = 0,
    podiums: int = 0,
    is_contender: bool = True,
    name: str | None = None,
    team: str = "Team",
) -> Contender:
    return Contender(
        id=contender_id,
        name=name if name is not None else contender_id,
        team=team,
        points=points,
        wins=wins,
        podiums=podiums,
        is_contender=is_contender,
    )


@pytest.fixture
def make_contender():
    """Factory for Contender records (id doubles as name by default)."""
    return _make_contender


@pytest.fixture
def finale_roster() -> list[Contender]:
    """The three 2025 finale contenders plus one driver outside the fight."""
    return [
        _make_contender("norris", 408, 7, 17, name="Lando Norris", team="McLaren"),
        _make_contender("verstappen", 396, 7, 14, name="Max Verstappen", team="Red Bull Racing"),
        _make_contender("piastri", 392, 7, 15, name="Oscar Piastri", team="McLaren"),
        _make_contender("russell", 309, 2, 9, is_contender=False, name="George Russell", team="Mercedes"),
    ]


@pytest.fixture
def service_log_dir(tmp_path):
    """Redirect the service call log to tmp_path and reset the cached logger."""
    import titlefight._logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("titlefight.service")
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "service_calls.log")

    yield tmp_path

    # Close file handlers to release file locks (important on Windows)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file


@pytest.fixture
def base_url() -> str:
    return BASE_URL
