"""
Local JSON file backend.

The file holds one JSON object mapping keys to string values. Writes go to a
uniquely named temporary sibling first and are moved into place with
os.replace, so readers never see a half-written file. Read-modify-write
cycles are serialized per store instance.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class CorruptStorageFile(ValueError):
    """Raised when the backing file is not a UTF-8 JSON object."""


class JsonFileKeyValueStore:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise CorruptStorageFile(f"{self.path} is not valid UTF-8 JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise CorruptStorageFile(f"{self.path} must hold a JSON object")
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.path.parent, prefix=self.path.name + ".", suffix=".tmp", delete=False
        ) as tmp:
            json.dump(data, tmp, ensure_ascii=False, indent=2)
        try:
            os.replace(tmp.name, self.path)
        except OSError:
            os.unlink(tmp.name)
            raise

    def _read_for_update(self) -> dict[str, str]:
        try:
            return self._read()
        except CorruptStorageFile:
            backup = self.path.with_name(self.path.name + ".corrupt")
            logger.warning("Storage file %s is corrupt; moving it to %s", self.path, backup)
            os.replace(self.path, backup)
            return {}

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise CorruptStorageFile(f"value under {key!r} in {self.path} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_for_update()
            data[key] = value
            self._write(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read_for_update()
            if key in data:
                del data[key]
                self._write(data)
