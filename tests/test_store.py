"""Tests for the store models and the in-memory notes store."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from store.memory import InMemoryNotesStore
from store.models import Note, StoreError, StoreResult
from store.protocol import NotesStore

# ===================================================================
# Models
# ===================================================================


class TestNoteModel:
    def test_defaults(self) -> None:
        note = Note(id="n1")
        assert note.title == ""
        assert note.content == ""
        assert note.created_at
        assert note.updated_at

    def test_id_required(self) -> None:
        with pytest.raises(ValidationError):
            Note(title="no id")

    def test_extra_columns_ignored(self) -> None:
        note = Note.model_validate({"id": "n1", "title": "T", "user_id": "u1"})
        assert not hasattr(note, "user_id")

    def test_frozen(self) -> None:
        note = Note(id="n1")
        with pytest.raises(ValidationError):
            note.title = "changed"


class TestStoreResult:
    def test_success(self) -> None:
        result = StoreResult.success([1])
        assert result.ok
        assert result.data == [1]
        assert result.error is None

    def test_failure(self) -> None:
        result = StoreResult.failure("boom")
        assert not result.ok
        assert result.data is None
        assert isinstance(result.error, StoreError)
        assert result.error.message == "boom"
        assert str(result.error) == "boom"


# ===================================================================
# In-memory store
# ===================================================================


@pytest.fixture()
def store() -> InMemoryNotesStore:
    return InMemoryNotesStore()


class TestInMemoryNotesStore:
    def test_satisfies_protocol(self, store: InMemoryNotesStore) -> None:
        assert isinstance(store, NotesStore)

    @pytest.mark.asyncio
    async def test_create(self, store: InMemoryNotesStore) -> None:
        result = await store.create("Title", "Content")
        assert result.ok
        assert result.data.title == "Title"
        assert result.data.content == "Content"
        assert result.data.created_at == result.data.updated_at
        assert store.count == 1

    @pytest.mark.asyncio
    async def test_create_requires_title(self, store: InMemoryNotesStore) -> None:
        result = await store.create("", "Content")
        assert result.error.message == "title is required"
        assert store.count == 0

    @pytest.mark.asyncio
    async def test_list_newest_first(self) -> None:
        store = InMemoryNotesStore(
            [
                Note(id="old", created_at="2024-01-01T00:00:00+00:00"),
                Note(id="new", created_at="2024-03-01T00:00:00+00:00"),
                Note(id="mid", created_at="2024-02-01T00:00:00+00:00"),
            ]
        )
        result = await store.list()
        assert [n.id for n in result.data] == ["new", "mid", "old"]

    @pytest.mark.asyncio
    async def test_get(self, store: InMemoryNotesStore) -> None:
        created = (await store.create("A", "aaa")).data
        assert (await store.get(created.id)).data == created
        assert (await store.get("ghost")).error is not None
        assert (await store.get("")).error.message == "id is required"

    @pytest.mark.asyncio
    async def test_update_partial(self, store: InMemoryNotesStore) -> None:
        created = (await store.create("A", "aaa")).data
        result = await store.update(created.id, content="bbb")
        assert result.data.title == "A"
        assert result.data.content == "bbb"
        assert result.data.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_update_missing(self, store: InMemoryNotesStore) -> None:
        assert (await store.update("ghost", title="x")).error is not None
        assert (await store.update("", title="x")).error.message == "id is required"

    @pytest.mark.asyncio
    async def test_delete(self, store: InMemoryNotesStore) -> None:
        created = (await store.create("A", "aaa")).data
        result = await store.delete(created.id)
        assert result.data == [{"id": created.id}]
        assert store.count == 0

    @pytest.mark.asyncio
    async def test_delete_missing_matches_nothing(self, store: InMemoryNotesStore) -> None:
        result = await store.delete("ghost")
        assert result.ok
        assert result.data == []
        assert (await store.delete("")).error.message == "id is required"
