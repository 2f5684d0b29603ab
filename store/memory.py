"""In-process notes store with the same semantics as the hosted table."""

from __future__ import annotations

import logging
from typing import Any, Optional
from uuid import uuid4

from store.models import Note, StoreResult, utc_now

logger = logging.getLogger(__name__)


class InMemoryNotesStore:
    """Keeps notes in a dict keyed by id. Nothing is written to disk."""

    name = "memory"

    def __init__(self, notes: Optional[list[Note]] = None) -> None:
        self._notes: dict[str, Note] = {n.id: n for n in notes or []}

    async def list(self) -> StoreResult[list[Note]]:
        """Return every note, newest first."""
        ordered = sorted(self._notes.values(), key=lambda n: n.created_at, reverse=True)
        return StoreResult.success(ordered)

    async def get(self, note_id: str) -> StoreResult[Note]:
        if not note_id:
            return StoreResult.failure("id is required")
        note = self._notes.get(note_id)
        if note is None:
            return StoreResult.failure(f"Note {note_id} not found")
        return StoreResult.success(note)

    async def create(self, title: str, content: str) -> StoreResult[Note]:
        """Insert a note with a fresh UUID and server timestamps."""
        if not title:
            return StoreResult.failure("title is required")
        now = utc_now()
        note = Note(
            id=str(uuid4()),
            title=title,
            content=content or "",
            created_at=now,
            updated_at=now,
        )
        self._notes[note.id] = note
        logger.info("Saved note %s — '%s'", note.id, note.title)
        return StoreResult.success(note)

    async def update(
        self,
        note_id: str,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> StoreResult[Note]:
        if not note_id:
            return StoreResult.failure("id is required")
        current = self._notes.get(note_id)
        if current is None:
            return StoreResult.failure(f"Note {note_id} not found")

        updates: dict[str, Any] = {"updated_at": utc_now()}
        if title is not None:
            updates["title"] = title
        if content is not None:
            updates["content"] = content
        note = current.model_copy(update=updates)
        self._notes[note_id] = note
        logger.info("Updated note %s", note_id)
        return StoreResult.success(note)

    async def delete(self, note_id: str) -> StoreResult[list[dict[str, Any]]]:
        """Remove a note. Deleting a missing id matches zero rows, like PostgREST."""
        if not note_id:
            return StoreResult.failure("id is required")
        if self._notes.pop(note_id, None) is None:
            return StoreResult.success([])
        logger.info("Deleted note %s", note_id)
        return StoreResult.success([{"id": note_id}])

    @property
    def count(self) -> int:
        """Number of stored notes."""
        return len(self._notes)
