"""JSON file key-value backend.

Stores every key in a single JSON object on disk, the terminal counterpart
of browser local storage. Writes go to a temporary file in the same
directory which then replaces the original, so a crash never leaves a
half-written document behind.
"""

import json
import os
import tempfile
from pathlib import Path

from ..errors import StorageError
from .base import KeyValueStore

DEFAULT_STORAGE_PATH = Path.home() / ".agichat" / "storage.json"


class FileKeyValueStore(KeyValueStore):
    """Key-value store persisted as one JSON document.

    A missing file reads as empty. A file that is not a JSON object is
    reported as StorageError on read; the next successful write replaces it.
    """

    def __init__(self, path: str | Path = DEFAULT_STORAGE_PATH):
        self._path = Path(path).expanduser()

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise StorageError(f"Cannot read storage file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self._path} does not hold a JSON object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(data, handle, indent=2, sort_keys=True)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write storage file {self._path}: {e}") from e

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError:
            # Unreadable document: start over rather than refuse every write
            data = {}
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    @property
    def backend_type(self) -> str:
        return "file"

    @property
    def path(self) -> Path:
        return self._path
