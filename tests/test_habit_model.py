from __future__ import annotations

import pytest

from tracker.domain.habits import Habit, InvalidHabitRecord


def test_record_shape_uses_completion_data_key():
    habit = Habit(id=1, name="Read", completion_data={"2026-10-19": [True] + [False] * 6})
    assert habit.to_record() == {
        "id": 1,
        "name": "Read",
        "completionData": {"2026-10-19": [True, False, False, False, False, False, False]},
    }


def test_from_record_accepts_string_ids_and_missing_completion_data():
    habit = Habit.from_record({"id": "abc", "name": "Run"})
    assert habit == Habit(id="abc", name="Run", completion_data={})


def test_completion_for_absent_week_is_all_false_and_not_materialized():
    habit = Habit(id=1, name="Read")
    assert habit.completion_for("2026-10-19") == [False] * 7
    assert habit.completion_data == {}


def test_completion_for_returns_a_copy():
    habit = Habit(id=1, name="Read", completion_data={"2026-10-19": [False] * 7})
    habit.completion_for("2026-10-19")[0] = True
    assert habit.completion_data["2026-10-19"][0] is False


def test_ensure_week_inserts_once():
    habit = Habit(id=1, name="Read")
    vector = habit.ensure_week("2026-10-19")
    vector[3] = True
    assert habit.ensure_week("2026-10-19")[3] is True


@pytest.mark.parametrize(
    "record",
    [
        ["not", "an", "object"],
        {"id": True, "name": "Read"},
        {"id": "  ", "name": "Read"},
        {"id": 1, "name": None},
        {"id": 1, "name": "Read", "completionData": []},
        {"id": 1, "name": "Read", "completionData": {"last-week": [False] * 7}},
        {"id": 1, "name": "Read", "completionData": {"2026-10-21": [False] * 7}},
        {"id": 1, "name": "Read", "completionData": {"2026-10-19": [False] * 6}},
        {"id": 1, "name": "Read", "completionData": {"2026-10-19": [0, 0, 0, 0, 0, 0, 1]}},
    ],
)
def test_from_record_rejects_malformed_records(record):
    with pytest.raises(InvalidHabitRecord):
        Habit.from_record(record)
