"""Notes state controller.

Keeps a local, optimistically-updated copy of the remote notes collection.
Each mutation is applied to the local state before the store is called and
is either confirmed or rolled back when the store answers:

    idle -> optimistic-applied -> (confirmed | rolled-back) -> idle

Store failures never raise out of the controller.  They are turned into a
single human-readable message in ``state.error`` (the latest failure wins).
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Optional
from uuid import uuid4

from pydantic import ValidationError

from notes.metrics import PENDING_OPERATIONS, ROLLBACKS, STORE_DURATION, STORE_REQUESTS
from notes.state import (
    NotesState,
    OperationKind,
    PendingOperation,
    begin_saving,
    clear_selection_of,
    end_saving,
    find_note,
    prepend_note,
    remove_note,
    replace_notes,
    select,
    set_error,
    set_loading,
    swap_note,
)
from store.models import DEFAULT_TITLE, Note, StoreResult, utc_now
from store.protocol import NotesStore

logger = logging.getLogger(__name__)

TEMP_ID_PREFIX = "temp-"

LOAD_FAILED = "Failed to load notes."
CREATE_FAILED = "Failed to create note."
UPDATE_FAILED = "Failed to update note."
DELETE_FAILED = "Failed to delete note."

Listener = Callable[[NotesState], None]


def is_temporary_id(note_id: Optional[str]) -> bool:
    """Whether ``note_id`` is a client placeholder not yet confirmed by the store."""
    return bool(note_id) and note_id.startswith(TEMP_ID_PREFIX)


class NotesController:
    """Owns the notes state and orchestrates optimistic CRUD against a store."""

    def __init__(self, store: NotesStore) -> None:
        self._store = store
        self._state = NotesState()
        self._pending: dict[str, PendingOperation] = {}
        self._listeners: list[Listener] = []

    @classmethod
    async def open(cls, store: NotesStore) -> NotesController:
        """Create a controller and run the initial load."""
        controller = cls(store)
        await controller.load()
        return controller

    @property
    def state(self) -> NotesState:
        """Current state snapshot."""
        return self._state

    @property
    def store(self) -> NotesStore:
        return self._store

    @property
    def pending(self) -> dict[str, OperationKind]:
        """In-flight mutation kind per note id (diagnostics only)."""
        return {note_id: op.kind for note_id, op in self._pending.items()}

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new state. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Loading and selection
    # ------------------------------------------------------------------

    async def load(self) -> None:
        """Replace the local collection with the store's list.

        A failed list still replaces the collection (usually with nothing);
        the previous notes are not kept.
        """
        self._commit(set_loading(set_error(self._state, None), True))

        try:
            result = await self._call("list", self._store.list)
        except asyncio.CancelledError:
            self._commit(set_loading(self._state, False))
            raise
        state = self._state
        if result.error:
            logger.warning("Failed to load notes: %s", result.error.message)
            state = set_error(state, result.error.message or LOAD_FAILED)
        notes = _normalize_notes(result.data)
        logger.info("Loaded %d notes from %s store", len(notes), self._store.name)
        self._commit(set_loading(replace_notes(state, notes), False))

    async def refresh(self) -> None:
        """Reload the collection from the store."""
        await self.load()

    def select_note(self, note_id: Optional[str]) -> None:
        """Select a note by id, or clear the selection with None."""
        self._commit(select(self._state, note_id))

    def dismiss_error(self) -> None:
        if self._state.error is not None:
            self._commit(set_error(self._state, None))

    # ------------------------------------------------------------------
    # Optimistic mutations
    # ------------------------------------------------------------------

    async def create_note(self, title: str = "", content: str = "") -> Optional[Note]:
        """Insert a provisional note at the front, then confirm it with the store.

        Returns the stored note, or None if the store rejected it.
        """
        temp_id = f"{TEMP_ID_PREFIX}{uuid4().hex}"
        now = utc_now()
        provisional = Note(
            id=temp_id,
            title=title or DEFAULT_TITLE,
            content=content or "",
            created_at=now,
            updated_at=now,
        )

        state = prepend_note(set_error(self._state, None), provisional)
        op = PendingOperation(OperationKind.CREATE, temp_id)
        self._begin(op)
        self._commit(begin_saving(select(state, temp_id)))

        result = await self._run(
            op,
            lambda: self._store.create(provisional.title, provisional.content),
        )

        note = _coerce_note(result.data) if result.ok else None
        if note is None:
            state = clear_selection_of(remove_note(self._state, temp_id), temp_id)
            self._fail(state, OperationKind.CREATE, result, CREATE_FAILED)
            return None

        state = remove_note(remove_note(self._state, temp_id), note.id)
        self._commit(end_saving(select(prepend_note(state, note), note.id)))
        logger.info("Created note %s (was %s)", note.id, temp_id)
        return note

    async def update_note(
        self,
        note_id: Optional[str],
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Note]:
        """Apply the given fields locally, then confirm them with the store.

        Fields left as None keep their current value.  Unknown ids are
        ignored without calling the store.  Returns the stored note, or None.
        """
        if not note_id:
            return None
        previous = find_note(self._state, note_id)
        if previous is None:
            logger.debug("Ignoring update for unknown note %s", note_id)
            return None

        updates: dict[str, Any] = {"updated_at": utc_now()}
        if title is not None:
            updates["title"] = title
        if content is not None:
            updates["content"] = content
        merged = previous.model_copy(update=updates)

        state = swap_note(set_error(self._state, None), note_id, merged)
        op = PendingOperation(OperationKind.UPDATE, note_id, snapshot=previous)
        self._begin(op)
        self._commit(begin_saving(state))

        result = await self._run(
            op,
            lambda: self._store.update(
                note_id, title=merged.title, content=merged.content
            ),
        )

        note = _coerce_note(result.data) if result.ok else None
        if note is None:
            state = swap_note(self._state, note_id, op.snapshot)
            self._fail(state, OperationKind.UPDATE, result, UPDATE_FAILED)
            return None

        self._commit(end_saving(swap_note(self._state, note_id, note)))
        return note

    async def delete_note(self, note_id: Optional[str]) -> bool:
        """Remove a note locally, then delete it in the store.

        On failure the whole collection is restored; the selection, if it
        was cleared, stays cleared.  Returns True when the store confirmed.
        """
        if not note_id:
            return False
        op = PendingOperation(OperationKind.DELETE, note_id, snapshot=self._state.notes)

        state = clear_selection_of(
            remove_note(set_error(self._state, None), note_id), note_id
        )
        self._begin(op)
        self._commit(begin_saving(state))

        result = await self._run(op, lambda: self._store.delete(note_id))

        if result.error:
            state = replace_notes(self._state, op.snapshot)
            self._fail(state, OperationKind.DELETE, result, DELETE_FAILED)
            return False

        self._commit(end_saving(self._state))
        logger.info("Deleted note %s", note_id)
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _commit(self, state: NotesState) -> None:
        """Publish a new snapshot to subscribers."""
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Notes state listener failed")

    def _begin(self, op: PendingOperation) -> None:
        self._pending[op.note_id] = op
        PENDING_OPERATIONS.set(len(self._pending))

    def _settle(self, op: PendingOperation) -> None:
        # a later mutation on the same id may have replaced this record
        if self._pending.get(op.note_id) is op:
            del self._pending[op.note_id]
        PENDING_OPERATIONS.set(len(self._pending))

    async def _run(
        self,
        op: PendingOperation,
        call: Callable[[], Awaitable[Optional[StoreResult[Any]]]],
    ) -> StoreResult[Any]:
        """Call the store for ``op``; the pending record is released however it ends.

        On cancellation the optimistic change stays applied but the saving
        flag is released, since the outcome is unknown.
        """
        try:
            return await self._call(op.kind.value, call)
        except asyncio.CancelledError:
            logger.warning("Cancelled %s of note %s", op.kind.value, op.note_id)
            self._commit(end_saving(self._state))
            raise
        finally:
            self._settle(op)

    def _fail(
        self,
        state: NotesState,
        kind: OperationKind,
        result: StoreResult[Any],
        default_message: str,
    ) -> None:
        """Commit a rolled-back state with the failure message."""
        message = (result.error.message if result.error else "") or default_message
        ROLLBACKS.labels(operation=kind.value).inc()
        logger.warning("Rolled back %s: %s", kind.value, message)
        self._commit(end_saving(set_error(state, message)))

    async def _call(
        self,
        operation: str,
        call: Callable[[], Awaitable[Optional[StoreResult[Any]]]],
    ) -> StoreResult[Any]:
        """Run one store call, recording metrics.

        A missing result counts as an empty success; an exception raised by
        the store counts as a failure.
        """
        start = time.perf_counter()
        try:
            result = await call()
        except Exception as e:
            logger.exception("Notes store %s raised", operation)
            result = StoreResult.failure(str(e) or type(e).__name__)
        if result is None:
            result = StoreResult()

        STORE_REQUESTS.labels(
            operation=operation,
            status="success" if result.ok else "error",
        ).inc()
        STORE_DURATION.labels(operation=operation).observe(time.perf_counter() - start)
        return result


def _coerce_note(data: Any) -> Optional[Note]:
    """Accept a Note or a raw row; anything else counts as missing."""
    if isinstance(data, Note):
        return data
    if isinstance(data, dict):
        try:
            return Note.model_validate(data)
        except ValidationError as e:
            logger.warning("Discarding malformed note from store: %s", e)
    return None


def _normalize_notes(data: Any) -> tuple[Note, ...]:
    """Turn a list result into notes; a non-list result becomes empty."""
    if not isinstance(data, (list, tuple)):
        return ()
    notes = (_coerce_note(row) for row in data)
    return tuple(n for n in notes if n is not None)
