"""Synchronous bridge between Streamlit reruns and the async notes controller.

The controller lives in ``st.session_state`` so optimistic state survives
reruns.  Each intent runs its coroutine to completion with ``asyncio.run``;
the store opens a fresh HTTP client per call, so no event loop is shared
between runs.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import streamlit as st

from notes.config import settings
from notes.controller import NotesController
from notes.state import NotesState
from store.factory import build_store
from store.models import Note

_CONTROLLER_KEY = "notes_controller"


def controller() -> NotesController:
    """Return the session's controller, creating and loading it on first use."""
    if _CONTROLLER_KEY not in st.session_state:
        store = build_store(settings)
        st.session_state[_CONTROLLER_KEY] = asyncio.run(NotesController.open(store))
    return st.session_state[_CONTROLLER_KEY]


def state() -> NotesState:
    return controller().state


def refresh() -> None:
    asyncio.run(controller().refresh())


def select_note(note_id: Optional[str]) -> None:
    controller().select_note(note_id)


def create_note(title: str = "Untitled", content: str = "") -> Optional[Note]:
    return asyncio.run(controller().create_note(title, content))


def update_note(
    note_id: str, title: Optional[str] = None, content: Optional[str] = None
) -> Optional[Note]:
    return asyncio.run(controller().update_note(note_id, title=title, content=content))


def delete_note(note_id: str) -> bool:
    return asyncio.run(controller().delete_note(note_id))


def dismiss_error() -> None:
    controller().dismiss_error()
