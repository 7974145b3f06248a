"""OpenF1 roster source: pre-race totals fetched from the OpenF1 API."""

from __future__ import annotations

import time
from collections import Counter
from typing import Any

from pydantic import TypeAdapter

from titlefight._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SyncTransport, build_query_params
from titlefight.constants import PODIUM_POSITIONS, TRACKED_CONTENDERS
from titlefight.exceptions import OpenF1APIError, OpenF1Error, OpenF1ValidationError
from titlefight.models.contender import Contender
from titlefight.models.openf1 import ChampionshipDriver, Driver, Session, SessionResult

GRAND_PRIX_SESSION_NAME = "Race"

# OpenF1 allows 3 req/s; 350ms keeps us safe
MIN_REQUEST_INTERVAL = 0.35


def _validate_list[T](model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise OpenF1ValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class OpenF1Client:
    """Synchronous client for the OpenF1 endpoints the roster builder needs.

    Usage:
        with OpenF1Client() as f1:
            roster = build_roster(f1, year=2025)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        min_request_interval: float = MIN_REQUEST_INTERVAL,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)
        self._min_request_interval = min_request_interval
        self._last_request_time: float | None = None

    def __enter__(self) -> OpenF1Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _rate_limit(self) -> None:
        """Sleep if needed to respect the OpenF1 API rate limit."""
        if self._last_request_time is not None:
            elapsed = time.monotonic() - self._last_request_time
            if elapsed < self._min_request_interval:
                time.sleep(self._min_request_interval - elapsed)
        self._last_request_time = time.monotonic()

    def _get[T](self, endpoint: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(**kwargs)
        self._rate_limit()
        data = self._transport.get(endpoint, params)
        return _validate_list(model, data)

    def championship_drivers(self, **kwargs: Any) -> list[ChampionshipDriver]:
        """Get driver championship standings."""
        return self._get("/championship_drivers", ChampionshipDriver, **kwargs)

    def drivers(self, **kwargs: Any) -> list[Driver]:
        """Get driver information for a session."""
        return self._get("/drivers", Driver, **kwargs)

    def sessions(self, **kwargs: Any) -> list[Session]:
        """Get session information (practice, qualifying, sprint, race)."""
        return self._get("/sessions", Session, **kwargs)

    def session_result(self, **kwargs: Any) -> list[SessionResult]:
        """Get final standings after a session.

        OpenF1 answers 404 for sessions without results yet; that is
        returned as an empty list.
        """
        try:
            return self._get("/session_result", SessionResult, **kwargs)
        except OpenF1APIError as exc:
            if exc.status_code == 404:
                return []
            raise


def _driver_name(driver: Driver | None, driver_number: int) -> str:
    if driver is None:
        return f"#{driver_number}"
    if driver.first_name and driver.last_name:
        return f"{driver.first_name} {driver.last_name}"
    return driver.full_name or driver.broadcast_name or f"#{driver_number}"


def _driver_id(driver: Driver | None, driver_number: int) -> str:
    if driver is not None and driver.name_acronym:
        return driver.name_acronym.lower()
    return str(driver_number)


def build_roster(
    client: OpenF1Client,
    year: int,
    contenders: int = TRACKED_CONTENDERS,
) -> list[Contender]:
    """Build a roster from the latest completed Grand Prix of ``year``.

    Points come from the championship standings after that race.  Wins and
    podiums are tallied from every Grand Prix result of the year (sprints
    excluded).  The top ``contenders`` drivers by championship position are
    flagged as the title fight.  Half points are truncated to whole points.
    """
    races = sorted(
        (s for s in client.sessions(year=year, session_name=GRAND_PRIX_SESSION_NAME)
         if s.session_key is not None),
        key=lambda s: s.session_key,
    )

    wins: Counter[int] = Counter()
    podiums: Counter[int] = Counter()
    last_race_key: int | None = None
    for race in races:
        results = client.session_result(session_key=race.session_key)
        if not results:
            continue
        last_race_key = race.session_key
        for r in results:
            if r.driver_number is None or r.position is None:
                continue
            if r.position == 1:
                wins[r.driver_number] += 1
            if r.position in PODIUM_POSITIONS:
                podiums[r.driver_number] += 1

    if last_race_key is None:
        raise OpenF1Error(f"No completed Grand Prix found for {year}")

    standings = sorted(
        (e for e in client.championship_drivers(session_key=last_race_key)
         if e.driver_number is not None),
        key=lambda e: (e.position_current is None, e.position_current or 0),
    )
    drivers = {
        d.driver_number: d
        for d in client.drivers(session_key=last_race_key)
        if d.driver_number is not None
    }

    roster: list[Contender] = []
    for idx, entry in enumerate(standings):
        dn = entry.driver_number
        driver = drivers.get(dn)
        roster.append(Contender(
            id=_driver_id(driver, dn),
            name=_driver_name(driver, dn),
            team=(driver.team_name if driver is not None else None) or "",
            points=int(entry.points_current or 0),
            wins=wins[dn],
            podiums=podiums[dn],
            is_contender=idx < contenders,
        ))
    return roster
