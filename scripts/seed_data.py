"""Seed the notes store with realistic sample notes.

Uses the store configured in `.env` (Supabase when SUPABASE_URL and
SUPABASE_KEY are set).  Against the in-memory store the script only
exercises the create path, since nothing outlives the process.

Usage:
    python scripts/seed_data.py [--dry-run]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from notes.config import settings  # noqa: E402
from store.factory import build_store  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("seed_data")

# Each entry: (title, content)
NOTES: list[tuple[str, str]] = [
    (
        "Project Ideas",
        "Build a notes client with optimistic updates and rollback. "
        "Try per-note operation queues if concurrent edits become a problem.",
    ),
    (
        "Meeting Notes",
        "Discussed moving the notes table to Supabase. Key decision: "
        "keep updated_at managed by the client until a trigger is added.",
    ),
    (
        "Reading List",
        "Designing Data-Intensive Applications\n"
        "Release It!\n"
        "A Philosophy of Software Design",
    ),
    ("Groceries", "Milk\nEggs\nCoffee beans\nSpinach"),
    ("Untitled", ""),
]


async def seed(dry_run: bool = False) -> int:
    """Create every sample note. Returns the number of failures."""
    store = build_store(settings)
    failures = 0
    for i, (title, content) in enumerate(NOTES, 1):
        if dry_run:
            print(f"[{i}/{len(NOTES)}] would create '{title}'")
            continue
        result = await store.create(title, content)
        if result.error:
            failures += 1
            print(f"[{i}/{len(NOTES)}] FAIL  '{title}': {result.error.message}")
        else:
            print(f"[{i}/{len(NOTES)}] OK    '{title}' -> {result.data.id}")
    return failures


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the notes store")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the notes that would be created without calling the store",
    )
    args = parser.parse_args()

    failures = asyncio.run(seed(dry_run=args.dry_run))
    print()
    if failures:
        print(f"{failures} of {len(NOTES)} notes failed.")
        sys.exit(1)
    print("Done.")


if __name__ == "__main__":
    main()
