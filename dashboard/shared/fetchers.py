"""Cached roster fetchers for the dashboard."""

from __future__ import annotations

import streamlit as st

from titlefight import sample_roster
from titlefight.openf1 import OpenF1Client, build_roster


@st.cache_data
def fetch_sample_roster() -> list[dict]:
    return [c.model_dump() for c in sample_roster()]


@st.cache_data(ttl=600)
def fetch_openf1_roster(year: int) -> list[dict]:
    with OpenF1Client() as f1:
        return [c.model_dump() for c in build_roster(f1, year=year)]
