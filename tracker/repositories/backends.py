"""Pick the key-value backend named by the settings."""
from __future__ import annotations

from tracker.core.config import STORAGE_BACKENDS, Settings
from tracker.repositories.base import InMemoryKeyValueStore, KeyValueStore
from tracker.repositories.json_storage import JsonFileKeyValueStore


def build_store(settings: Settings) -> KeyValueStore:
    backend = settings.storage_backend
    if backend == "json":
        return JsonFileKeyValueStore(settings.data_file)
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "sql":
        from tracker.db.create_tables import create_all
        from tracker.repositories.sql_repository import SQLKeyValueStore

        create_all()
        return SQLKeyValueStore()
    raise ValueError(f"Unknown storage backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}")
