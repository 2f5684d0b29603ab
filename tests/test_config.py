"""Tests for notes.config and the store factory."""

from __future__ import annotations

from notes.config import Settings
from store.factory import build_store
from store.memory import InMemoryNotesStore
from store.supabase import SupabaseNotesStore


class TestSettings:
    def test_rest_url(self) -> None:
        s = Settings(supabase_url="https://project.supabase.co/", supabase_key="k")
        assert s.rest_url == "https://project.supabase.co/rest/v1/notes"

    def test_custom_table(self) -> None:
        s = Settings(
            supabase_url="https://project.supabase.co",
            supabase_key="k",
            notes_table="memos",
        )
        assert s.rest_url.endswith("/rest/v1/memos")

    def test_configured_needs_url_and_key(self) -> None:
        assert Settings(supabase_url="https://x.supabase.co", supabase_key="k").supabase_configured
        assert not Settings(supabase_url="https://x.supabase.co", supabase_key="").supabase_configured
        assert not Settings(supabase_url="", supabase_key="k").supabase_configured


class TestBuildStore:
    def test_supabase_when_configured(self) -> None:
        s = Settings(supabase_url="https://x.supabase.co", supabase_key="k")
        assert isinstance(build_store(s), SupabaseNotesStore)

    def test_memory_fallback(self) -> None:
        s = Settings(supabase_url="", supabase_key="")
        assert isinstance(build_store(s), InMemoryNotesStore)
