"""A JSON array on disk guarded by a per-path lock.

Every repository instance pointing at the same file shares one lock, so a
read-check-write sequence done under ``locked()`` is atomic within the
process.  Writes go through a temporary file and ``os.replace`` so readers
never see a half-written file.
"""

from __future__ import annotations

import json
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

_locks: dict[Path, threading.RLock] = {}
_registry_lock = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _registry_lock:
        return _locks.setdefault(path, threading.RLock())


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self.path = file_path.resolve()
        self._lock = _lock_for(self.path)
        self._ensure_file()

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def load(self) -> list[dict]:
        with self._lock:
            return json.loads(self.path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        with self._lock:
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp, self.path)

    def _ensure_file(self) -> None:
        with self._lock:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text("[]", encoding="utf-8")
