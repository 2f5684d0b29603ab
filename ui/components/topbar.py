"""Topbar: app title, New / Refresh actions and the error banner."""

from __future__ import annotations

import streamlit as st

from ui import api


def render() -> None:
    """Render the topbar for the current notes state."""
    state = api.state()

    col_title, col_new, col_refresh = st.columns([6, 1, 1])
    with col_title:
        st.title("📝 Notes")
    with col_new:
        st.button(
            "＋ New",
            key="topbar_new",
            use_container_width=True,
            disabled=state.is_loading,
            on_click=api.create_note,
            help="Create a new note",
        )
    with col_refresh:
        st.button(
            "⟳ Refresh",
            key="topbar_refresh",
            use_container_width=True,
            disabled=state.is_loading,
            on_click=api.refresh,
            help="Reload notes from the store",
        )

    if state.is_loading:
        st.caption("Loading notes...")
    elif state.is_saving:
        st.caption("Saving...")

    if state.error:
        col_msg, col_dismiss = st.columns([7, 1])
        with col_msg:
            st.error(state.error)
        with col_dismiss:
            st.button("Dismiss", key="topbar_dismiss", on_click=api.dismiss_error)
