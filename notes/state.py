"""Immutable notes state and the pure transitions applied to it.

The controller never mutates a ``NotesState``; every change produces a new
snapshot via one of the helpers below, so presentation code can hold on to
a snapshot without seeing it change underneath.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from store.models import Note


class OperationKind(str, Enum):
    """Kind of optimistic mutation in flight for a note id."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class PendingOperation:
    """Record of an applied optimistic mutation and what is needed to undo it."""

    kind: OperationKind
    note_id: str
    snapshot: Optional[tuple[Note, ...] | Note] = None


@dataclass(frozen=True)
class NotesState:
    """Snapshot consumed by the list, editor and toolbar views."""

    notes: tuple[Note, ...] = ()
    selected_note_id: Optional[str] = None
    is_loading: bool = True
    saving: int = 0  # mutations in flight
    error: Optional[str] = None

    @property
    def is_saving(self) -> bool:
        return self.saving > 0

    @property
    def selected_note(self) -> Optional[Note]:
        """The selected note, or None when the id is no longer in the list."""
        return find_note(self, self.selected_note_id)


def find_note(state: NotesState, note_id: Optional[str]) -> Optional[Note]:
    if not note_id:
        return None
    return next((n for n in state.notes if n.id == note_id), None)


def replace_notes(state: NotesState, notes: tuple[Note, ...]) -> NotesState:
    return replace(state, notes=notes)


def prepend_note(state: NotesState, note: Note) -> NotesState:
    return replace(state, notes=(note, *state.notes))


def swap_note(state: NotesState, note_id: str, note: Note) -> NotesState:
    """Replace the note with ``note_id`` in place, keeping its position."""
    return replace(
        state, notes=tuple(note if n.id == note_id else n for n in state.notes)
    )


def remove_note(state: NotesState, note_id: str) -> NotesState:
    return replace(state, notes=tuple(n for n in state.notes if n.id != note_id))


def select(state: NotesState, note_id: Optional[str]) -> NotesState:
    return replace(state, selected_note_id=note_id or None)


def clear_selection_of(state: NotesState, note_id: str) -> NotesState:
    """Clear the selection only if it still points at ``note_id``."""
    if state.selected_note_id != note_id:
        return state
    return replace(state, selected_note_id=None)


def begin_saving(state: NotesState) -> NotesState:
    return replace(state, saving=state.saving + 1)


def end_saving(state: NotesState) -> NotesState:
    return replace(state, saving=max(state.saving - 1, 0))


def set_error(state: NotesState, error: Optional[str]) -> NotesState:
    return replace(state, error=error)


def set_loading(state: NotesState, is_loading: bool) -> NotesState:
    return replace(state, is_loading=is_loading)
