"""Blob store backends for persisted documents."""

import logging
import re
import sqlite3
from pathlib import Path

from word_drill.exceptions import StorageError

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileBlobStore:
    """Stores each key as ``<key>.json`` inside a directory."""

    def __init__(self, directory: Path):
        """Initialize the store.

        Args:
            directory: Folder holding the documents (created on first write)
        """
        self.directory = directory

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Error reading {path}: {e}") from e

    def write(self, key: str, data: str) -> None:
        path = self._path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(data, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise StorageError(f"Error writing {path}: {e}") from e
        logger.debug(f"Wrote {len(data)} chars to {path.name}")

    def delete(self, key: str) -> None:
        """Remove a stored document if present."""
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Error deleting {path}: {e}") from e


class MemoryBlobStore:
    """Dict-backed store for tests and embedding."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._blobs: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._blobs.get(key)

    def write(self, key: str, data: str) -> None:
        self._blobs[key] = data

    def delete(self, key: str) -> None:
        self._blobs.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._blobs)


class SqliteBlobStore:
    """Stores documents as rows of a single SQLite table."""

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file
        """
        self._db_path = db_path

    def initialize(self) -> None:
        """Create the database and table if they don't exist."""
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self._db_path)
            try:
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS blobs ("
                    "key TEXT PRIMARY KEY, "
                    "data TEXT NOT NULL, "
                    "updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP"
                    ")"
                )
                conn.commit()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Error initializing {self._db_path}: {e}") from e

    def read(self, key: str) -> str | None:
        if not self._db_path.exists():
            return None
        try:
            conn = sqlite3.connect(self._db_path)
            try:
                row = conn.execute("SELECT data FROM blobs WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Error reading {key!r} from {self._db_path}: {e}") from e
        return row[0] if row is not None else None

    def write(self, key: str, data: str) -> None:
        try:
            conn = sqlite3.connect(self._db_path)
            try:
                conn.execute(
                    "INSERT INTO blobs (key, data, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
                    "ON CONFLICT(key) DO UPDATE SET data = excluded.data, "
                    "updated_at = excluded.updated_at",
                    (key, data),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Error writing {key!r} to {self._db_path}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            conn = sqlite3.connect(self._db_path)
            try:
                conn.execute("DELETE FROM blobs WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Error deleting {key!r} from {self._db_path}: {e}") from e


def create_blob_store(backend: str, data_dir: Path):
    """Build the blob store named in the config.

    Args:
        backend: "json" or "sqlite"
        data_dir: Folder holding the stored documents

    Raises:
        StorageError: If the backend is unknown or cannot be initialized
    """
    if backend == "json":
        return JsonFileBlobStore(data_dir)
    if backend == "sqlite":
        store = SqliteBlobStore(data_dir / "progress.db")
        store.initialize()
        return store
    raise StorageError(f"Unknown storage backend: {backend!r}")
