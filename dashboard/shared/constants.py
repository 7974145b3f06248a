"""Shared constants for the title fight dashboard."""

from __future__ import annotations

F1_RED = "#E10600"
CONTENDER_COLOR = "#FF8700"
FIELD_COLOR = "#888888"

NO_POINTS_OPTION_LABEL = "No points / DNF"

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

ROSTER_SOURCES: list[str] = ["Sample (2025 finale)", "Upload JSON", "OpenF1"]
