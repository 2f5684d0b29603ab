"""Pick the notes store implementation from settings."""

from __future__ import annotations

import logging

from notes.config import Settings
from store.memory import InMemoryNotesStore
from store.protocol import NotesStore
from store.supabase import SupabaseNotesStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> NotesStore:
    """Return the Supabase store when configured, otherwise an in-memory one."""
    if settings.supabase_configured:
        logger.info("Using Supabase notes store: %s", settings.rest_url)
        return SupabaseNotesStore(
            settings.rest_url,
            settings.supabase_key,
            timeout=settings.request_timeout,
        )
    logger.warning(
        "SUPABASE_URL / SUPABASE_KEY not set — notes are kept in memory only"
    )
    return InMemoryNotesStore()
