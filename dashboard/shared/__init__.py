"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    CONTENDER_COLOR,
    F1_RED,
    FIELD_COLOR,
    NO_POINTS_OPTION_LABEL,
    PLOTLY_LAYOUT_DEFAULTS,
    ROSTER_SOURCES,
)
from .formatters import (
    champion_banner,
    format_finish,
    is_champion_row,
    no_scenarios_message,
    scenario_heading,
    standings_rows,
)

__all__ = [
    "CONTENDER_COLOR",
    "F1_RED",
    "FIELD_COLOR",
    "NO_POINTS_OPTION_LABEL",
    "PLOTLY_LAYOUT_DEFAULTS",
    "ROSTER_SOURCES",
    "champion_banner",
    "format_finish",
    "is_champion_row",
    "no_scenarios_message",
    "scenario_heading",
    "standings_rows",
]
