"""
Persistence adapter for the habit collection.

The whole collection lives as one JSON array under a single key of a
KeyValueStore. Nothing here raises to the caller on save or load: failures
are logged (and forwarded to the diagnostic hook) and degrade to "no data" or
"not saved", leaving the in-memory collection authoritative.
"""
from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

from tracker.core.diagnostics import DiagnosticHook, report
from tracker.domain.habits import Habit, InvalidHabitRecord
from tracker.repositories.base import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "habit-tracker-data"


def serialize(habits: Iterable[Habit]) -> str:
    """Validate every habit against the persisted shape, then dump the array."""
    records = []
    for habit in habits:
        record = habit.to_record() if isinstance(habit, Habit) else habit
        records.append(Habit.from_record(record).to_record())
    return json.dumps(records, ensure_ascii=False)


class HabitPersistence:
    def __init__(
        self,
        store: KeyValueStore,
        *,
        diagnostics: Optional[DiagnosticHook] = None,
        key: str = STORAGE_KEY,
    ) -> None:
        self.store = store
        self.key = key
        self._diagnostics = diagnostics

    def save(self, habits) -> bool:
        """Write the full collection; returns False (after logging) instead of raising."""
        if not isinstance(habits, (list, tuple)):
            report(
                logger, self._diagnostics, logging.ERROR, "save.invalid_type",
                "Refusing to save habits: expected a list, got %s", type(habits).__name__,
                type=type(habits).__name__,
            )
            return False
        try:
            payload = serialize(habits)
            self.store.set(self.key, payload)
        except Exception as exc:
            report(
                logger, self._diagnostics, logging.ERROR, "save.failed",
                "Could not save %d habit(s) under %r", len(habits), self.key,
                exc_info=True, error=repr(exc),
            )
            return False
        report(
            logger, self._diagnostics, logging.DEBUG, "save.ok",
            "Saved %d habit(s) under %r", len(habits), self.key,
            count=len(habits),
        )
        return True

    def load(self) -> list[Habit]:
        """Read the collection back; absent, unreadable or wrong-shaped data yields []."""
        try:
            raw = self.store.get(self.key)
        except Exception as exc:
            report(
                logger, self._diagnostics, logging.ERROR, "load.read_failed",
                "Could not read %r from storage", self.key,
                exc_info=True, error=repr(exc),
            )
            return []
        if not raw:
            report(logger, self._diagnostics, logging.DEBUG, "load.empty", "No saved habits under %r", self.key)
            return []
        try:
            parsed = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            report(
                logger, self._diagnostics, logging.ERROR, "load.unparseable",
                "Saved habits under %r are not valid JSON: %s", self.key, exc,
                error=str(exc),
            )
            return []
        if not isinstance(parsed, list):
            report(
                logger, self._diagnostics, logging.ERROR, "load.invalid_shape",
                "Saved habits under %r must be a list, got %s", self.key, type(parsed).__name__,
                type=type(parsed).__name__,
            )
            return []
        return self._habits_from_records(parsed)

    def clear(self) -> None:
        self.store.delete(self.key)
        report(logger, self._diagnostics, logging.INFO, "clear", "Cleared saved habits under %r", self.key)

    def _habits_from_records(self, records: list) -> list[Habit]:
        habits: list[Habit] = []
        seen_ids: set = set()
        for position, record in enumerate(records):
            try:
                habit = Habit.from_record(record)
            except InvalidHabitRecord as exc:
                report(
                    logger, self._diagnostics, logging.WARNING, "load.invalid_record",
                    "Skipping saved habit #%d: %s", position, exc,
                    position=position, error=str(exc),
                )
                continue
            if habit.id in seen_ids:
                report(
                    logger, self._diagnostics, logging.WARNING, "load.duplicate_id",
                    "Skipping saved habit #%d: id %r already used", position, habit.id,
                    position=position, id=habit.id,
                )
                continue
            seen_ids.add(habit.id)
            habits.append(habit)
        return habits
