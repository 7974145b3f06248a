"""F1 Title Decider — Streamlit what-if table and strategy room."""

from __future__ import annotations

import datetime

import plotly.graph_objects as go
import streamlit as st

from titlefight import ChampionshipService, TitleFightError, loads_roster, parse_roster

from shared import (
    CONTENDER_COLOR,
    F1_RED,
    FIELD_COLOR,
    PLOTLY_LAYOUT_DEFAULTS,
    ROSTER_SOURCES,
    champion_banner,
    format_finish,
    is_champion_row,
    no_scenarios_message,
    scenario_heading,
    standings_rows,
)
from shared.fetchers import fetch_openf1_roster, fetch_sample_roster

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="F1 Title Decider",
    page_icon="\U0001f3c6",
    layout="wide",
)


# ── Sidebar — roster source ──────────────────────────────────────────────────

st.sidebar.title("Title Decider")

source = st.sidebar.radio("Roster", ROSTER_SOURCES)

try:
    if source == "Upload JSON":
        uploaded = st.sidebar.file_uploader("Roster JSON", type=["json"])
        if uploaded is None:
            st.info("Upload a roster JSON file to start.")
            st.stop()
        roster = loads_roster(uploaded.getvalue())
    elif source == "OpenF1":
        current_year = datetime.date.today().year
        year = st.sidebar.selectbox("Season", list(range(current_year, 2022, -1)))
        with st.spinner("Loading standings from OpenF1..."):
            roster = parse_roster(fetch_openf1_roster(year))
    else:
        roster = parse_roster(fetch_sample_roster())
except TitleFightError as exc:
    st.sidebar.error(f"Failed to load roster: {exc}")
    st.stop()

if not roster:
    st.warning("The roster is empty.")
    st.stop()

service = ChampionshipService(roster)


# ── What-if table ────────────────────────────────────────────────────────────

st.header("Final race what-if")

finish_options: list[int | None] = [None, *range(1, len(roster) + 1)]
finish_keys = {c.id: f"finish-{c.id}" for c in roster}

with st.form("what-if"):
    cols = st.columns(3)
    for idx, c in enumerate(roster):
        label = f"{c.name} ({c.points} pts)"
        if c.is_contender:
            label = f"★ {label}"
        cols[idx % 3].selectbox(
            label,
            finish_options,
            format_func=format_finish,
            key=finish_keys[c.id],
        )
    simulate_clicked = st.form_submit_button("Simulate", type="primary")
    reset_clicked = st.form_submit_button("Reset")

if reset_clicked:
    for key in finish_keys.values():
        st.session_state.pop(key, None)
    st.rerun()

if simulate_clicked:
    finishes = {cid: st.session_state.get(key) for cid, key in finish_keys.items()}
    outcome = service.simulate(finishes)

    banner = champion_banner(outcome)
    if outcome.is_tie:
        st.warning(banner)
    elif banner:
        st.success(banner)

    st.dataframe(standings_rows(outcome), hide_index=True, use_container_width=True)

    bar_colors = [
        F1_RED if is_champion_row(outcome, r)
        else CONTENDER_COLOR if r.is_contender
        else FIELD_COLOR
        for r in outcome.standings
    ]
    fig = go.Figure(go.Bar(
        x=[r.name for r in outcome.standings],
        y=[r.final_points for r in outcome.standings],
        marker_color=bar_colors,
        text=[r.final_points for r in outcome.standings],
        textposition="outside",
    ))
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        title="Final points",
        yaxis_title="Points",
        height=420,
    )
    st.plotly_chart(fig, use_container_width=True)


# ── Strategy room ────────────────────────────────────────────────────────────

st.header("Strategy room")

contenders = service.contenders
if not contenders:
    st.info("No drivers in this roster are flagged as title contenders.")
    st.stop()

target = st.radio(
    "What does this driver need?",
    contenders,
    format_func=lambda c: c.name,
    horizontal=True,
)

try:
    with st.spinner("Calculating scenarios..."):
        groups = service.strategy(target.id)
except TitleFightError as exc:
    st.error(str(exc))
    st.stop()

if not groups:
    st.info(no_scenarios_message(target.name))
else:
    card_cols = st.columns(min(len(groups), 3))
    for idx, group in enumerate(groups):
        with card_cols[idx % len(card_cols)].container(border=True):
            st.markdown(f"#### {scenario_heading(target.name, group)}")
            for constraint in group.constraints:
                st.markdown(f"- {constraint.description}")
            st.caption(f"{group.scenario_count} winning combinations")
