"""Contract every notes store implements.

Operations never raise for store-side failures; they return a
:class:`~store.models.StoreResult` whose ``error`` describes the problem.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from store.models import Note, StoreResult


@runtime_checkable
class NotesStore(Protocol):
    """Durable owner of record for notes."""

    name: str

    async def list(self) -> StoreResult[list[Note]]:
        """All notes, newest ``created_at`` first."""
        ...

    async def get(self, note_id: str) -> StoreResult[Note]:
        """A single note by id."""
        ...

    async def create(self, title: str, content: str) -> StoreResult[Note]:
        """Insert a note and return the stored row."""
        ...

    async def update(
        self,
        note_id: str,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> StoreResult[Note]:
        """Patch the given fields and return the stored row."""
        ...

    async def delete(self, note_id: str) -> StoreResult[list[dict[str, Any]]]:
        """Delete a note; ``data`` holds the deleted ids."""
        ...
