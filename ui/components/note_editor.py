"""Editor for the selected note."""

from __future__ import annotations

import streamlit as st

from ui import api


def _widget_keys(note_id: str) -> tuple[str, str]:
    return f"title_{note_id}", f"content_{note_id}"


def _save(note_id: str) -> None:
    """Send the edited fields of ``note_id`` to the controller.

    When the update is rolled back the input widgets are reset so they show
    the restored note instead of the rejected edit.
    """
    title_key, content_key = _widget_keys(note_id)
    saved = api.update_note(
        note_id,
        title=st.session_state.get(title_key),
        content=st.session_state.get(content_key),
    )
    if saved is None:
        for key in (title_key, content_key):
            st.session_state.pop(key, None)


def render() -> None:
    """Render title/content inputs bound to the selected note."""
    state = api.state()
    note = state.selected_note

    if note is None:
        st.caption("Select a note from the list to start editing.")
        return

    col_label, col_delete = st.columns([6, 1])
    with col_label:
        st.caption(f"Editing: **{note.title or 'Untitled'}**")
    with col_delete:
        st.button(
            "Delete",
            key="editor_delete",
            type="primary",
            disabled=state.is_loading,
            on_click=api.delete_note,
            args=(note.id,),
            help="Delete current note",
        )

    # Widget keys are per note id so switching notes re-syncs the inputs
    title_key, content_key = _widget_keys(note.id)
    st.text_input("Title", value=note.title, key=title_key)
    st.text_area("Content", value=note.content, height=320, key=content_key)
    st.button(
        "Save",
        key="editor_save",
        disabled=state.is_loading,
        on_click=_save,
        args=(note.id,),
    )
    st.caption(f"Last updated {note.updated_at}")
