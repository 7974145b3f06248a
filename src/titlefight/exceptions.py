"""Custom exceptions for the title fight calculator."""

from __future__ import annotations


class TitleFightError(Exception):
    """Base exception for all title fight errors."""


class RosterError(TitleFightError):
    """Raised when a roster cannot be read or fails validation."""


class UnknownContenderError(TitleFightError):
    """Raised when a scenario target is not one of the tracked contenders."""

    def __init__(self, contender_id: str) -> None:
        self.contender_id = contender_id
        super().__init__(f"{contender_id!r} is not a tracked title contender")


class ContenderCountError(TitleFightError):
    """Raised when the roster does not track the expected number of contenders."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Scenario search needs exactly {expected} contenders, roster has {found}"
        )


class OpenF1Error(TitleFightError):
    """Base exception for OpenF1 data source errors."""


class OpenF1ConnectionError(OpenF1Error):
    """Raised when the client cannot connect to the API."""


class OpenF1TimeoutError(OpenF1Error):
    """Raised when a request to the API times out."""


class OpenF1APIError(OpenF1Error):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class OpenF1ValidationError(OpenF1Error):
    """Raised when API response data fails model validation."""
