"""Sidebar: store backend and collection summary."""

from __future__ import annotations

import streamlit as st

from ui import api


def render() -> None:
    """Render the shared sidebar."""
    ctrl = api.controller()
    state = ctrl.state
    with st.sidebar:
        st.header("Notes")
        st.metric("Total notes", len(state.notes))
        st.caption(f"Store: `{ctrl.store.name}`")
        if ctrl.store.name == "memory":
            st.warning(
                "Supabase is not configured. Notes are kept in memory "
                "and lost when the app restarts."
            )
