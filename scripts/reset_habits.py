#!/usr/bin/env python3
"""
Clear the saved habit collection of the configured storage backend.

Usage:
  python scripts/reset_habits.py [--dump] [--yes]

The backend comes from HABITS_STORAGE_BACKEND / HABITS_DATA_FILE / DATABASE_URL.
"""
from __future__ import annotations

import argparse
import sys

from tracker.core.config import get_settings
from tracker.repositories.backends import build_store
from tracker.services.persistence import STORAGE_KEY, HabitPersistence


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Clear saved habits")
    ap.add_argument("--dump", action="store_true", help="print the stored value before clearing it")
    ap.add_argument("--yes", action="store_true", help="do not ask for confirmation")
    args = ap.parse_args(argv)

    settings = get_settings()
    store = build_store(settings)
    raw = store.get(STORAGE_KEY)
    if raw is None:
        print(f"Nothing saved under {STORAGE_KEY!r} ({settings.storage_backend} backend)")
        return 0
    if args.dump:
        print(raw)
    if not args.yes:
        answer = input(f"Clear {STORAGE_KEY!r} from the {settings.storage_backend} backend? [y/N] ")
        if answer.strip().lower() not in {"y", "yes"}:
            print("Aborted")
            return 1
    HabitPersistence(store).clear()
    print("OK: saved habits cleared")
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
