"""Unit tests for notes.state — snapshot helpers and transitions."""

from __future__ import annotations

import dataclasses

import pytest

from notes.state import (
    NotesState,
    begin_saving,
    clear_selection_of,
    end_saving,
    find_note,
    prepend_note,
    remove_note,
    select,
    swap_note,
)
from store.models import Note


def _note(note_id: str, title: str = "T") -> Note:
    return Note(id=note_id, title=title)


@pytest.fixture()
def state() -> NotesState:
    return NotesState(notes=(_note("a"), _note("b"), _note("c")), is_loading=False)


class TestNotesState:
    def test_frozen(self, state: NotesState) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.error = "nope"  # type: ignore[misc]

    def test_selected_note_resolves(self, state: NotesState) -> None:
        assert select(state, "b").selected_note == state.notes[1]

    def test_selected_note_missing_is_none(self, state: NotesState) -> None:
        s = select(state, "ghost")
        assert s.selected_note_id == "ghost"
        assert s.selected_note is None

    def test_is_saving_counts_mutations(self, state: NotesState) -> None:
        s = begin_saving(begin_saving(state))
        assert s.is_saving is True
        s = end_saving(s)
        assert s.is_saving is True
        s = end_saving(s)
        assert s.is_saving is False
        assert end_saving(s).saving == 0


class TestTransitions:
    def test_transitions_do_not_mutate_input(self, state: NotesState) -> None:
        before = state.notes
        remove_note(state, "a")
        prepend_note(state, _note("z"))
        assert state.notes is before

    def test_prepend(self, state: NotesState) -> None:
        s = prepend_note(state, _note("z"))
        assert [n.id for n in s.notes] == ["z", "a", "b", "c"]

    def test_swap_keeps_position(self, state: NotesState) -> None:
        s = swap_note(state, "b", _note("b", title="changed"))
        assert [n.id for n in s.notes] == ["a", "b", "c"]
        assert s.notes[1].title == "changed"

    def test_remove(self, state: NotesState) -> None:
        assert [n.id for n in remove_note(state, "b").notes] == ["a", "c"]
        assert remove_note(state, "ghost").notes == state.notes

    def test_find_note(self, state: NotesState) -> None:
        assert find_note(state, "c") == state.notes[2]
        assert find_note(state, "ghost") is None
        assert find_note(state, None) is None

    def test_clear_selection_only_when_matching(self, state: NotesState) -> None:
        s = select(state, "a")
        assert clear_selection_of(s, "b").selected_note_id == "a"
        assert clear_selection_of(s, "a").selected_note_id is None
