"""OpenF1 API records used to build a roster."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Driver(BaseModel):
    """Driver info for a specific session."""

    model_config = ConfigDict(frozen=True)

    broadcast_name: str | None = None
    driver_number: int | None = None
    first_name: str | None = None
    full_name: str | None = None
    last_name: str | None = None
    name_acronym: str | None = None
    session_key: int | None = None
    team_name: str | None = None


class Session(BaseModel):
    """F1 session (practice, qualifying, sprint, race)."""

    model_config = ConfigDict(frozen=True)

    date_start: datetime | None = None
    meeting_key: int | None = None
    session_key: int | None = None
    session_name: str | None = None
    session_type: str | None = None
    year: int | None = None


class SessionResult(BaseModel):
    """Classified finish of one driver in a session."""

    model_config = ConfigDict(frozen=True)

    driver_number: int | None = None
    dnf: bool | None = None
    dns: bool | None = None
    dsq: bool | None = None
    meeting_key: int | None = None
    points: float | None = None
    position: int | None = None
    session_key: int | None = None


class ChampionshipDriver(BaseModel):
    """Driver championship standing after a session."""

    model_config = ConfigDict(frozen=True)

    driver_number: int | None = None
    meeting_key: int | None = None
    points_current: float | None = None
    points_start: float | None = None
    position_current: int | None = None
    position_start: int | None = None
    session_key: int | None = None
