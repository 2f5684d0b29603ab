"""Supabase notes store.

Talks to the PostgREST endpoint of the ``notes`` table.  Table schema:

- id: uuid (primary key)
- title: text
- content: text
- created_at: timestamptz (default now())
- updated_at: timestamptz (managed by the client or a trigger)

Every call opens its own ``httpx.AsyncClient`` so the store is not tied to
a particular event loop.  Failures are logged and returned as a
``StoreResult`` carrying a ``StoreError``; nothing is raised.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from store.models import Note, StoreResult, utc_now

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0  # seconds

# PostgREST returns a bare object instead of a one-element array
_SINGLE_OBJECT = "application/vnd.pgrst.object+json"


class SupabaseNotesStore:
    """Async client for the hosted ``notes`` table."""

    name = "supabase"

    def __init__(
        self,
        rest_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = rest_url
        self._timeout = timeout
        self._transport = transport
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def list(self) -> StoreResult[list[Note]]:
        """Fetch all notes ordered by created_at descending."""
        result = await self._request(
            "GET", params={"select": "*", "order": "created_at.desc"}
        )
        if result.error:
            return result
        return self._parse_notes(result.data)

    async def get(self, note_id: str) -> StoreResult[Note]:
        """Fetch a single note by id."""
        if not note_id:
            return StoreResult.failure("id is required")
        result = await self._request(
            "GET",
            params={"select": "*", "id": f"eq.{note_id}"},
            single=True,
        )
        if result.error:
            return result
        return self._parse_note(result.data)

    async def create(self, title: str, content: str) -> StoreResult[Note]:
        """Insert a new note and return the stored row."""
        if not title:
            return StoreResult.failure("title is required")
        now = utc_now()
        result = await self._request(
            "POST",
            json=[
                {
                    "title": title,
                    "content": content or "",
                    "created_at": now,
                    "updated_at": now,
                }
            ],
            single=True,
        )
        if result.error:
            return result
        return self._parse_note(result.data)

    async def update(
        self,
        note_id: str,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> StoreResult[Note]:
        """Patch the provided fields of a note and return the stored row."""
        if not note_id:
            return StoreResult.failure("id is required")
        updates: dict[str, Any] = {"updated_at": utc_now()}
        if title is not None:
            updates["title"] = title
        if content is not None:
            updates["content"] = content

        result = await self._request(
            "PATCH",
            params={"id": f"eq.{note_id}"},
            json=updates,
            single=True,
        )
        if result.error:
            return result
        return self._parse_note(result.data)

    async def delete(self, note_id: str) -> StoreResult[list[dict[str, Any]]]:
        """Delete a note by id, returning the deleted id rows."""
        if not note_id:
            return StoreResult.failure("id is required")
        return await self._request(
            "DELETE", params={"id": f"eq.{note_id}", "select": "id"}
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        *,
        params: Optional[dict[str, str]] = None,
        json: Any = None,
        single: bool = False,
    ) -> StoreResult[Any]:
        """Send one request and wrap the decoded body in a StoreResult."""
        headers = dict(self._headers)
        if single:
            headers["Accept"] = _SINGLE_OBJECT

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.request(
                    method, self._url, params=params, json=json, headers=headers
                )
        except httpx.HTTPError as e:
            logger.error("Supabase %s failed: %s", method, e)
            return StoreResult.failure(str(e) or type(e).__name__)

        if resp.is_error:
            message = _error_message(resp)
            logger.error(
                "Supabase error: %s %s -> %d %s",
                method,
                self._url,
                resp.status_code,
                message,
            )
            return StoreResult.failure(message)

        if not resp.content:
            return StoreResult.success(None)
        try:
            return StoreResult.success(resp.json())
        except ValueError as e:
            logger.error("Supabase returned invalid JSON: %s", e)
            return StoreResult.failure("Invalid response from notes store")

    @staticmethod
    def _parse_note(raw: Any) -> StoreResult[Note]:
        try:
            return StoreResult.success(Note.model_validate(raw))
        except ValidationError as e:
            logger.error("Unexpected note payload: %s", e)
            return StoreResult.failure("Invalid note returned by notes store")

    @staticmethod
    def _parse_notes(raw: Any) -> StoreResult[list[Note]]:
        if not isinstance(raw, list):
            return StoreResult.success(raw)
        try:
            return StoreResult.success([Note.model_validate(r) for r in raw])
        except ValidationError as e:
            logger.error("Unexpected notes payload: %s", e)
            return StoreResult.failure("Invalid notes returned by notes store")


def _error_message(resp: httpx.Response) -> str:
    """Extract the PostgREST error message, falling back to the HTTP reason."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {resp.status_code}: {resp.reason_phrase}"
