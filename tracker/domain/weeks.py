"""Domain helpers for Monday-start weeks and their canonical keys."""
from __future__ import annotations

import re
from datetime import date, datetime, timedelta

DAYS_PER_WEEK = 7
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEK_KEY_FORMAT = "%Y-%m-%d"
WEEK_KEY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def week_start(reference: date) -> date:
    """Return the Monday that opens the week containing ``reference``."""
    day = _as_date(reference)
    return day - timedelta(days=day.weekday())


def week_key(reference: date) -> str:
    """Canonical ``YYYY-MM-DD`` key of the week containing ``reference``."""
    return week_start(reference).strftime(WEEK_KEY_FORMAT)


def is_week_key(value: object) -> bool:
    """Return True when value is a ``YYYY-MM-DD`` string naming a Monday."""
    if not isinstance(value, str) or not WEEK_KEY_PATTERN.fullmatch(value):
        return False
    try:
        day = datetime.strptime(value, WEEK_KEY_FORMAT)
    except ValueError:
        return False
    return day.weekday() == 0


def shift_weeks(reference: date, weeks: int) -> date:
    return _as_date(reference) + timedelta(days=DAYS_PER_WEEK * weeks)


def week_days(reference: date) -> list[date]:
    """The seven consecutive dates, Monday to Sunday, of the week containing ``reference``."""
    monday = week_start(reference)
    return [monday + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def week_label(reference: date) -> str:
    """
    Human-readable range of the week, e.g. ``Oct 19 - Oct 25, 2026``.

    Weeks straddling a year boundary carry the year on both ends.
    """
    days = week_days(reference)
    first, last = days[0], days[-1]
    if first.year != last.year:
        return f"{first:%b} {first.day}, {first.year} - {last:%b} {last.day}, {last.year}"
    return f"{first:%b} {first.day} - {last:%b} {last.day}, {last.year}"
