"""
Persisted ordered key-value store.

``OrderedStore`` maps string keys to fixed-shape pydantic records and
keeps them in a SQLite table (``kv_entries``) partitioned by a numeric
region identifier, so several independent stores can share one
database file.  Iteration is always in ascending key order.

Each public call opens its own connection and runs in a single
transaction: either the whole call is applied or nothing is.  Any
SQLite failure, an oversized key or value, or a stored value that no
longer decodes is reported as :class:`StorageError`.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as SchemaError

from .db import get_connection
from .errors import StorageError

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=BaseModel)


class OrderedStore(Generic[V]):
    """Ordered mapping from string key to a record of type ``model``."""

    def __init__(
        self,
        region_id: int,
        model: Type[V],
        *,
        max_key_size: int,
        max_value_size: int,
        connection_factory: Optional[Callable[[], sqlite3.Connection]] = None,
    ) -> None:
        self.region_id = region_id
        self.model = model
        self.max_key_size = max_key_size
        self.max_value_size = max_value_size
        self._connection_factory = connection_factory or get_connection

    def __repr__(self) -> str:
        return f"OrderedStore(region_id={self.region_id}, model={self.model.__name__})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert(self, key: str, value: V) -> Optional[V]:
        """Insert or overwrite ``key`` and return the previous value, if any."""
        self._check_key(key)
        encoded = self._encode(key, value)
        with self._transaction("insert", key) as conn:
            row = self._select(conn, key)
            previous = self._decode(key, row["value"]) if row else None
            conn.execute(
                "INSERT INTO kv_entries (region_id, key, value) VALUES (?, ?, ?)"
                " ON CONFLICT(region_id, key) DO UPDATE SET value = excluded.value",
                (self.region_id, key, encoded),
            )
        return previous

    def get(self, key: str) -> Optional[V]:
        """Return the value stored under ``key`` or ``None``."""
        with self._transaction("get", key) as conn:
            row = self._select(conn, key)
            return self._decode(key, row["value"]) if row else None

    def remove(self, key: str) -> Optional[V]:
        """Delete ``key`` and return the removed value, or ``None`` if absent."""
        with self._transaction("remove", key) as conn:
            row = self._select(conn, key)
            if not row:
                return None
            removed = self._decode(key, row["value"])
            conn.execute(
                "DELETE FROM kv_entries WHERE region_id = ? AND key = ?",
                (self.region_id, key),
            )
        return removed

    def values(self) -> List[V]:
        """Return a snapshot of all values in ascending key order."""
        with self._transaction("values") as conn:
            rows = conn.execute(
                "SELECT key, value FROM kv_entries WHERE region_id = ? ORDER BY key ASC",
                (self.region_id,),
            ).fetchall()
            return [self._decode(row["key"], row["value"]) for row in rows]

    def __len__(self) -> int:
        with self._transaction("len") as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS count FROM kv_entries WHERE region_id = ?",
                (self.region_id,),
            ).fetchone()
            return int(row["count"])

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @contextmanager
    def _transaction(self, action: str, key: Optional[str] = None) -> Iterator[sqlite3.Connection]:
        """Yield a connection; commit on success, roll back and wrap errors on failure."""
        target = f"key={key} " if key is not None else ""
        try:
            conn = self._connection_factory()
        except sqlite3.Error as exc:
            logger.error("Cannot open store region %s: %s", self.region_id, exc)
            raise StorageError(f"Storage unavailable for {action}: {exc}") from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            logger.error("Store %s failed on %s %s: %s", self.region_id, action, target, exc)
            raise StorageError(f"Storage error during {action} {target}in region {self.region_id}: {exc}") from exc
        except StorageError:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _select(self, conn: sqlite3.Connection, key: str) -> Optional[sqlite3.Row]:
        return conn.execute(
            "SELECT value FROM kv_entries WHERE region_id = ? AND key = ?",
            (self.region_id, key),
        ).fetchone()

    def _check_key(self, key: str) -> None:
        size = len(key.encode("utf-8"))
        if size > self.max_key_size:
            raise StorageError(
                f"Key of {size} bytes exceeds the {self.max_key_size}-byte limit of region {self.region_id}"
            )

    def _encode(self, key: str, value: V) -> str:
        encoded = value.model_dump_json(by_alias=True)
        size = len(encoded.encode("utf-8"))
        if size > self.max_value_size:
            raise StorageError(
                f"Value for key={key} is {size} bytes, exceeding the "
                f"{self.max_value_size}-byte limit of region {self.region_id}"
            )
        return encoded

    def _decode(self, key: str, raw: str) -> V:
        try:
            return self.model.model_validate_json(raw)
        except SchemaError as exc:
            logger.error("Corrupt value for key=%s in region %s", key, self.region_id)
            raise StorageError(f"Stored value for key={key} is corrupt: {exc.error_count()} error(s)") from exc
