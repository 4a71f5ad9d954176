"""A JSON array stored in one file, shared by the JSON repositories.

Every I/O or decoding failure is surfaced as TransportError; callers
decide whether to retry.  Writes go to a temporary file that replaces
the real one, so readers never see a half-written array.  Writers that
read, check and write back hold ``locked()`` for the whole sequence.
"""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from filelock import FileLock, Timeout

from repuestos.domain.exceptions import TransportError

LOCK_TIMEOUT_SECONDS = 10


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = FileLock(f"{file_path}.lock", timeout=LOCK_TIMEOUT_SECONDS)
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold an exclusive lock on ``<file>.lock``, across threads and processes."""
        try:
            self._lock.acquire()
        except Timeout as exc:
            raise TransportError(f"Timed out waiting for {self._lock.lock_file}") from exc
        try:
            yield
        finally:
            self._lock.release()

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise TransportError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list):
            raise TransportError(f"{self._file_path} does not contain a JSON array")
        return records

    def persist(self, records: list[dict]) -> None:
        content = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f".{self._file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(content)
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise TransportError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with self.locked():
                if not self._file_path.exists():
                    self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise TransportError(f"Cannot create {self._file_path}: {exc}") from exc
