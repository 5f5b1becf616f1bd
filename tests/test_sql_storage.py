"""
Smoke tests for the SQL key-value backend against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from tracker.core import config as core_config
from tracker.db import session as db_session
from tracker.db import models
from tracker.domain.habits import Habit
from tracker.repositories.backends import build_store
from tracker.repositories.sql_repository import SQLKeyValueStore
from tracker.services.persistence import STORAGE_KEY, HabitPersistence


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset cached settings/engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("HABITS_STORAGE_BACKEND", "sql")
    core_config.get_settings.cache_clear()
    db_session.reset_engine()

    yield db_file

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    db_session.reset_engine()
    core_config.get_settings.cache_clear()


def test_build_store_creates_table(temp_db):
    store = build_store(core_config.get_settings())
    assert isinstance(store, SQLKeyValueStore)
    assert store.get(STORAGE_KEY) is None


def test_set_overwrites_and_delete_removes(temp_db):
    store = build_store(core_config.get_settings())
    store.set("k", "one")
    store.set("k", "two")
    assert store.get("k") == "two"
    store.delete("k")
    assert store.get("k") is None
    store.delete("k")


def test_persistence_round_trip_through_sql(temp_db):
    habits = [
        Habit(id=1, name="Read", completion_data={"2026-10-19": [False, False, True, False, False, False, False]}),
        Habit(id="b", name="Run"),
    ]
    persistence = HabitPersistence(build_store(core_config.get_settings()))
    assert persistence.save(habits) is True
    assert HabitPersistence(SQLKeyValueStore()).load() == habits
    persistence.clear()
    assert persistence.load() == []


def test_sql_backend_requires_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    monkeypatch.setenv("HABITS_STORAGE_BACKEND", "sql")
    core_config.get_settings.cache_clear()
    db_session.reset_engine()
    try:
        with pytest.raises(RuntimeError):
            build_store(core_config.get_settings())
    finally:
        core_config.get_settings.cache_clear()
