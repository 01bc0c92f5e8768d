"""A JSON list on disk, shared safely between repository instances.

Writers hold an OS-level lock on a sibling ``.lock`` file for the whole
load-modify-persist cycle, so increments from other instances or other
processes are never lost.  Files are replaced atomically, so readers
never see a half-written document and need no lock.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock


class JsonFileStore:

    def __init__(self, file_path: Path, lock_timeout: float = 10.0) -> None:
        self._file_path = file_path
        self._lock = FileLock(f"{file_path}.lock", timeout=lock_timeout)
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    @contextmanager
    def update(self) -> Iterator[list[dict]]:
        """Yield the records under the file lock and persist them on exit.

        Nothing is written if the block raises.
        """
        with self._lock:
            records = self.read()
            yield records
            self._write(records)

    def _write(self, records: list[dict]) -> None:
        fd, tmp_path = tempfile.mkstemp(
            dir=self._file_path.parent,
            prefix=f".{self._file_path.name}_",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(records, tmp, indent=2)
                tmp.write("\n")
            os.replace(tmp_path, self._file_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            if not self._file_path.exists():
                self._write([])
