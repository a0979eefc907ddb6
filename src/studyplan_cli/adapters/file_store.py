"""Key-value store adapters: JSON files on disk and an in-memory dict."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from studyplan_cli.repositories.repository import KeyValueStore


class FileKeyValueStore(KeyValueStore):
    """Store each key as ``<key>.json`` inside a directory.

    Writes go to a temporary file in the same directory which is then moved
    over the target, so readers see either the old or the new content.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store, used for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
