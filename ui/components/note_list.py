"""Note list: one row per note with select and delete buttons."""

from __future__ import annotations

import streamlit as st

from notes.controller import is_temporary_id
from notes.state import NotesState
from store.models import Note
from ui import api

_PREVIEW_CHARS = 60


def _preview(note: Note) -> str:
    """First line of the content, shortened for the list."""
    first_line = note.content.strip().splitlines()[0] if note.content.strip() else ""
    if len(first_line) > _PREVIEW_CHARS:
        return first_line[: _PREVIEW_CHARS - 1] + "…"
    return first_line or "No content"


def _render_row(note: Note, state: NotesState) -> None:
    selected = note.id == state.selected_note_id
    col_select, col_delete = st.columns([5, 1])
    with col_select:
        label = f"**{note.title or 'Untitled'}**  \n{_preview(note)}"
        st.button(
            label,
            key=f"select_{note.id}",
            use_container_width=True,
            type="primary" if selected else "secondary",
            on_click=api.select_note,
            args=(note.id,),
        )
    with col_delete:
        st.button(
            "🗑",
            key=f"delete_{note.id}",
            help="Delete note",
            disabled=is_temporary_id(note.id),
            on_click=api.delete_note,
            args=(note.id,),
        )
    if is_temporary_id(note.id):
        st.caption("Saving...")


def render() -> None:
    """Render the list of notes, newest first."""
    state = api.state()
    st.subheader("All notes")

    if state.is_loading and not state.notes:
        st.info("Loading notes...")
        return

    if not state.notes:
        st.info("No notes yet.")
        st.button("Create your first note", key="list_create", on_click=api.create_note)
        return

    for note in state.notes:
        _render_row(note, state)
