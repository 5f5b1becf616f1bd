"""Key-value slots backed by SQLAlchemy, one row per key."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete

from tracker.db.models import KeyValueEntry
from tracker.db.session import get_session


class SQLKeyValueStore:
    """KeyValueStore over the ``kv_entries`` table."""

    def get(self, key: str) -> Optional[str]:
        with get_session() as session:
            entry = session.get(KeyValueEntry, key)
            return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        with get_session() as session:
            entry = session.get(KeyValueEntry, key)
            if not entry:
                session.add(KeyValueEntry(key=key, value=value, created_at=now, updated_at=now))
            else:
                entry.value = value
                entry.updated_at = now
            session.commit()

    def delete(self, key: str) -> None:
        with get_session() as session:
            session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
            session.commit()
