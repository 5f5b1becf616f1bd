from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Make the tracker package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tracker.repositories.base import InMemoryKeyValueStore  # noqa: E402
from tracker.services.habit_store import HabitStore  # noqa: E402
from tracker.services.persistence import HabitPersistence  # noqa: E402

# Wednesday; its week starts on Monday 2026-10-19
WEDNESDAY = date(2026, 10, 21)


class RecordingHook:
    """Diagnostic hook that remembers every event it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def __call__(self, event: str, details: dict) -> None:
        self.events.append((event, details))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def hook() -> RecordingHook:
    return RecordingHook()


@pytest.fixture()
def persistence(kv, hook) -> HabitPersistence:
    return HabitPersistence(kv, diagnostics=hook)


@pytest.fixture()
def store(persistence, hook) -> HabitStore:
    return HabitStore(persistence, today=lambda: WEDNESDAY, clock=lambda: 1_700_000_000.0, diagnostics=hook)
