"""Create the ``kv_entries`` table; run as a module to prepare a database by hand."""
from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers KeyValueEntry on Base.metadata


def create_all(engine: Engine | None = None) -> None:
    Base.metadata.create_all(bind=engine or get_engine())


if __name__ == "__main__":
    try:
        create_all()
    except (RuntimeError, SQLAlchemyError) as exc:
        raise SystemExit(f"Failed to create kv_entries: {exc}") from exc
    print("kv_entries is ready.")
