"""
Habit records and their persisted shape.

A habit maps week keys to completion vectors of seven booleans, Monday first.
Weeks that were never toggled are absent from the mapping and read as all
false.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, Union

from .weeks import DAYS_PER_WEEK, is_week_key

HabitId = Union[int, str]


class InvalidHabitRecord(ValueError):
    """Raised when a persisted record does not describe a habit."""


def empty_week() -> list[bool]:
    return [False] * DAYS_PER_WEEK


def is_completion_vector(value: object) -> bool:
    return (
        isinstance(value, list)
        and len(value) == DAYS_PER_WEEK
        and all(isinstance(item, bool) for item in value)
    )


def is_habit_id(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(value.strip())


@dataclass
class Habit:
    id: HabitId
    name: str
    completion_data: dict[str, list[bool]] = field(default_factory=dict)

    def completion_for(self, key: str) -> list[bool]:
        """Copy of the vector for ``key``; all false when the week was never toggled."""
        vector = self.completion_data.get(key)
        if vector is None:
            return empty_week()
        return list(vector)

    def ensure_week(self, key: str) -> list[bool]:
        """Return the stored vector for ``key``, inserting an all-false one first if needed."""
        vector = self.completion_data.get(key)
        if vector is None:
            vector = empty_week()
            self.completion_data[key] = vector
        return vector

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "completionData": {key: list(vector) for key, vector in self.completion_data.items()},
        }

    @classmethod
    def from_record(cls, record: object) -> "Habit":
        """Build a Habit from its persisted record, validating every field."""
        if not isinstance(record, Mapping):
            raise InvalidHabitRecord("habit record must be an object")
        habit_id = record.get("id")
        if not is_habit_id(habit_id):
            raise InvalidHabitRecord(f"invalid habit id: {habit_id!r}")
        name = record.get("name")
        if not isinstance(name, str):
            raise InvalidHabitRecord(f"invalid habit name: {name!r}")
        raw = record.get("completionData")
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise InvalidHabitRecord("completionData must be an object")
        completion: dict[str, list[bool]] = {}
        for key, vector in raw.items():
            if not is_week_key(key):
                raise InvalidHabitRecord(f"invalid week key: {key!r}")
            if not is_completion_vector(vector):
                raise InvalidHabitRecord(f"week {key} must hold exactly {DAYS_PER_WEEK} booleans")
            completion[key] = list(vector)
        return cls(id=habit_id, name=name, completion_data=completion)
