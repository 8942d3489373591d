"""
SQLite-backed implementation of the path store.
One WAL-mode database under a configurable data directory:
  data/
    pathstore.db: entries(path TEXT PRIMARY KEY, value BLOB) WITHOUT ROWID
Each operation runs in its own transaction; the connection is shared by all
request threads and guarded by a lock for the duration of one transaction.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .codec import StoredValue, decode, encode
from .errors import (
    EngineReadError,
    EngineWriteError,
    NotFound,
    StoreClosedError,
    StoreOpenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DB_FILENAME = "pathstore.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS entries (
    path  TEXT PRIMARY KEY,
    value BLOB NOT NULL
) WITHOUT ROWID
"""


class PathStore:
    """Path-keyed persistence of StoredValue blobs over an embedded SQLite engine."""

    def __init__(self, data_dir: Path, timeout: float = 30.0):
        self.data_dir = Path(data_dir)
        self.db_path = self.data_dir / DB_FILENAME
        self.timeout = timeout
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    # Lifecycle
    def open(self) -> "PathStore":
        with self._lock:
            if self._conn is not None:
                return self
            self._conn = self._connect()
        logger.info("Path store opened at %s", self.db_path)
        return self

    def _connect(self) -> sqlite3.Connection:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(
                self.db_path,
                timeout=self.timeout,
                isolation_level=None,  # transactions are begun explicitly
                check_same_thread=False,
            )
        except (OSError, sqlite3.Error) as e:
            raise StoreOpenError(f"Unable to open store at {self.db_path}: {e}") from e
        try:
            conn.execute("PRAGMA journal_mode = WAL")
            conn.execute("PRAGMA synchronous = NORMAL")
            conn.execute(f"PRAGMA busy_timeout = {int(self.timeout * 1000)}")
            conn.execute(_SCHEMA)
        except sqlite3.Error as e:
            conn.close()
            raise StoreOpenError(f"Unable to initialize store at {self.db_path}: {e}") from e
        return conn

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            conn, self._conn = self._conn, None
            try:
                conn.close()
            except sqlite3.Error as e:
                logger.error("Failed to close path store: %s", e)
                raise
        logger.info("Path store closed")

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def __enter__(self) -> "PathStore":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @contextmanager
    def _transaction(self, write: bool) -> Iterator[sqlite3.Connection]:
        """Hold the connection for one transaction; commit on success, roll back on any error."""
        with self._lock:
            conn = self._conn
            if conn is None:
                raise StoreClosedError("Path store is not open")
            conn.execute("BEGIN IMMEDIATE" if write else "BEGIN")
            try:
                yield conn
                conn.commit()
            except BaseException:
                conn.rollback()
                raise

    @staticmethod
    def _check_path(path: str) -> None:
        if not isinstance(path, str) or not path:
            raise ValidationError("Path is required")
        try:
            path.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValidationError(f"Path is not valid UTF-8: {e}") from e

    # Operations
    def put(self, path: str, value: StoredValue) -> None:
        """Replace the value at path. Visible to every subsequent get once this returns."""
        self._check_path(path)
        blob = encode(value)
        try:
            with self._transaction(write=True) as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO entries (path, value) VALUES (?, ?)",
                    (path, blob),
                )
        except sqlite3.Error as e:
            logger.error("Write failed for %s: %s", path, e, exc_info=True)
            raise EngineWriteError(f"Failed to store '{path}': {e}") from e
        logger.debug("Stored %s (%d bytes, %s)", path, len(blob), value.content_type)

    def get(self, path: str) -> StoredValue:
        """Return the value at path or raise NotFound."""
        self._check_path(path)
        try:
            with self._transaction(write=False) as conn:
                row = conn.execute(
                    "SELECT value FROM entries WHERE path = ?", (path,)
                ).fetchone()
        except sqlite3.Error as e:
            logger.error("Read failed for %s: %s", path, e, exc_info=True)
            raise EngineReadError(f"Failed to read '{path}': {e}") from e
        if row is None:
            raise NotFound(path)
        return decode(row[0])

    def delete(self, path: str) -> None:
        """Remove the value at path. Absent paths are a no-op; callers check existence."""
        self._check_path(path)
        try:
            with self._transaction(write=True) as conn:
                conn.execute("DELETE FROM entries WHERE path = ?", (path,))
        except sqlite3.Error as e:
            logger.error("Delete failed for %s: %s", path, e, exc_info=True)
            raise EngineWriteError(f"Failed to delete '{path}': {e}") from e
        logger.debug("Deleted %s", path)
