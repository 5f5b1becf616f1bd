"""
In-memory habit collection and the currently viewed week.

Every mutating call saves the full collection through the persistence
adapter. Invalid input (blank names, out-of-range indexes) leaves the state
untouched and returns None.
"""
from __future__ import annotations

import functools
import logging
import threading
import time
from datetime import date
from typing import Callable, Optional

from tracker.core.diagnostics import DiagnosticHook, report
from tracker.domain import weeks
from tracker.domain.habits import Habit
from tracker.services.persistence import HabitPersistence

logger = logging.getLogger(__name__)


def _locked(method):
    """Run ``method`` holding the store lock; the web front end calls in from worker threads."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class HabitStore:
    """Source of truth for the habit list; mirrors every change to persistence."""

    def __init__(
        self,
        persistence: HabitPersistence,
        *,
        today: Callable[[], date] = date.today,
        clock: Callable[[], float] = time.time,
        diagnostics: Optional[DiagnosticHook] = None,
        autoload: bool = True,
    ) -> None:
        self.persistence = persistence
        self._clock = clock
        self._diagnostics = diagnostics
        self._habits: list[Habit] = []
        self._lock = threading.RLock()
        self.viewed_date: date = today()
        if autoload:
            self.load()

    @property
    @_locked
    def habits(self) -> tuple[Habit, ...]:
        return tuple(self._habits)

    def __len__(self) -> int:
        return len(self._habits)

    @_locked
    def load(self) -> None:
        """Replace the collection with whatever persistence returns."""
        self._habits = self.persistence.load()
        report(
            logger, self._diagnostics, logging.INFO, "store.loaded",
            "Loaded %d habit(s)", len(self._habits),
            count=len(self._habits),
        )

    # -------------------------- mutations --------------------------
    @_locked
    def add_habit(self, name: str) -> Optional[Habit]:
        cleaned = (name or "").strip()
        if not cleaned:
            report(logger, self._diagnostics, logging.INFO, "store.add_ignored", "Ignoring blank habit name")
            return None
        habit = Habit(id=self._new_id(), name=cleaned)
        self._habits.append(habit)
        report(
            logger, self._diagnostics, logging.DEBUG, "store.added",
            "Added habit %r (%s)", habit.name, habit.id,
            id=habit.id, name=habit.name,
        )
        self._save()
        return habit

    @_locked
    def remove_habit(self, index: int) -> Optional[Habit]:
        if not self._valid_index(index):
            report(
                logger, self._diagnostics, logging.WARNING, "store.remove_ignored",
                "No habit at index %r to remove", index,
                index=index,
            )
            return None
        removed = self._habits.pop(index)
        report(
            logger, self._diagnostics, logging.DEBUG, "store.removed",
            "Removed habit %r (%s)", removed.name, removed.id,
            id=removed.id, index=index,
        )
        self._save()
        return removed

    @_locked
    def toggle_day(self, habit_index: int, day_index: int) -> Optional[bool]:
        """Flip one day of the viewed week; returns the new value."""
        if not self._valid_index(habit_index) or not _valid_day(day_index):
            report(
                logger, self._diagnostics, logging.WARNING, "store.toggle_ignored",
                "Cannot toggle habit %r day %r", habit_index, day_index,
                habit_index=habit_index, day_index=day_index,
            )
            return None
        key = self.current_week_key()
        vector = self._habits[habit_index].ensure_week(key)
        vector[day_index] = not vector[day_index]
        report(
            logger, self._diagnostics, logging.DEBUG, "store.toggled",
            "Habit %d week %s day %d -> %s", habit_index, key, day_index, vector[day_index],
            habit_index=habit_index, week_key=key, day_index=day_index, value=vector[day_index],
        )
        self._save()
        return vector[day_index]

    # -------------------------- queries --------------------------
    @_locked
    def get_completion_data(self, habit: Habit, week_key: Optional[str] = None) -> list[bool]:
        return habit.completion_for(week_key or self.current_week_key())

    def current_week_key(self) -> str:
        return weeks.week_key(self.viewed_date)

    def week_days(self) -> list[date]:
        return weeks.week_days(self.viewed_date)

    def week_label(self) -> str:
        return weeks.week_label(self.viewed_date)

    # -------------------------- navigation --------------------------
    @_locked
    def next_week(self) -> None:
        self.viewed_date = weeks.shift_weeks(self.viewed_date, 1)

    @_locked
    def previous_week(self) -> None:
        self.viewed_date = weeks.shift_weeks(self.viewed_date, -1)

    # -------------------------- internals --------------------------
    def _valid_index(self, index: object) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(self._habits)

    def _new_id(self) -> int:
        candidate = int(self._clock() * 1000)
        taken = [habit.id for habit in self._habits if isinstance(habit.id, int) and not isinstance(habit.id, bool)]
        if taken and candidate <= max(taken):
            candidate = max(taken) + 1
        return candidate

    def _save(self) -> bool:
        return self.persistence.save(self._habits)


def _valid_day(day_index: object) -> bool:
    return isinstance(day_index, int) and not isinstance(day_index, bool) and 0 <= day_index < weeks.DAYS_PER_WEEK
