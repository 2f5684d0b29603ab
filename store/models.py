"""Pydantic models shared by the notes store clients and the controller."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TITLE = "Untitled"

T = TypeVar("T")


def utc_now() -> str:
    """Current time as an ISO-8601 string."""
    return datetime.now(UTC).isoformat()


class Note(BaseModel):
    """A single note row from the ``notes`` table."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str = Field(default="", description="Note title")
    content: str = Field(default="", description="Note body")
    created_at: str = Field(
        default_factory=utc_now,
        description="ISO-8601 creation timestamp",
    )
    updated_at: str = Field(
        default_factory=utc_now,
        description="ISO-8601 last update timestamp",
    )


class StoreError(Exception):
    """Failure reported by a notes store (validation, HTTP or network)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """``{data, error}`` pair returned by every store operation."""

    data: Optional[T] = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T) -> StoreResult[T]:
        return cls(data=data)

    @classmethod
    def failure(cls, message: str) -> StoreResult[T]:
        return cls(error=StoreError(message))
