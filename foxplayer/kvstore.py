"""Bucketed key/value storage on local database files."""

from __future__ import annotations

import json
import sqlite3
import threading
from collections.abc import MutableMapping
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Protocol, Union, runtime_checkable

Key = Union[bytes, bytearray, str]

_MAX_ID = (1 << 64) - 1

_SCHEMA = """
CREATE TABLE IF NOT EXISTS buckets (
    name TEXT PRIMARY KEY,
    sequence INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE IF NOT EXISTS entries (
    bucket TEXT NOT NULL,
    key BLOB NOT NULL,
    value BLOB NOT NULL,
    PRIMARY KEY (bucket, key)
);
"""


class StorageError(Exception):
    """Raised when the local store cannot complete an operation."""


class BucketNotFoundError(StorageError, KeyError):
    """Raised when reading from a bucket that was never created."""

    def __init__(self, bucket: str) -> None:
        super().__init__(f"Bucket({bucket}) not exists!")
        self.bucket = bucket

    def __str__(self) -> str:
        return self.args[0]


@runtime_checkable
class Model(Protocol):
    """Something stored in a named database and bucket."""

    @property
    def db_name(self) -> str: ...

    @property
    def table_name(self) -> str: ...


@runtime_checkable
class KVModel(Model, Protocol):
    """A model that lives under a single fixed key."""

    @property
    def key(self) -> str: ...


def id_to_bin(value: int) -> bytes:
    """Encode an id as 8 big-endian bytes so keys sort numerically."""
    if not 0 <= value <= _MAX_ID:
        raise ValueError(f"id out of range: {value}")
    return value.to_bytes(8, "big")


def _key_bytes(key: Key) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


class LocalDB:
    """One database file holding named buckets of byte keys and values."""

    def __init__(self, path: str | Path, timeout: float = 0.5) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()
        try:
            self._conn = sqlite3.connect(
                str(self.path), timeout=timeout, check_same_thread=False
            )
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise StorageError(f"cannot open {self.path}: {exc}") from exc

    def __enter__(self) -> LocalDB:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _ensure_bucket(self, bucket: str) -> None:
        self._conn.execute(
            "INSERT OR IGNORE INTO buckets (name) VALUES (?)", (bucket,)
        )

    def _require_bucket(self, bucket: str) -> None:
        row = self._conn.execute(
            "SELECT 1 FROM buckets WHERE name = ?", (bucket,)
        ).fetchone()
        if row is None:
            raise BucketNotFoundError(bucket)

    def get(self, bucket: str, key: Key) -> bytes | None:
        """Value stored under ``key``, or None; the bucket must exist."""
        with self._lock:
            self._require_bucket(bucket)
            row = self._conn.execute(
                "SELECT value FROM entries WHERE bucket = ? AND key = ?",
                (bucket, _key_bytes(key)),
            ).fetchone()
        return None if row is None else bytes(row[0])

    def put(self, bucket: str, key: Key, value: bytes) -> None:
        """Store ``value`` under ``key``, creating the bucket if needed."""
        raw_key = _key_bytes(key)
        if not raw_key:
            raise StorageError("key required")
        with self._lock, self._conn:
            self._ensure_bucket(bucket)
            self._conn.execute(
                "INSERT OR REPLACE INTO entries (bucket, key, value) VALUES (?, ?, ?)",
                (bucket, raw_key, bytes(value)),
            )

    def delete(self, bucket: str, key: Key) -> None:
        """Remove ``key``; missing keys are ignored, the bucket is created."""
        with self._lock, self._conn:
            self._ensure_bucket(bucket)
            self._conn.execute(
                "DELETE FROM entries WHERE bucket = ? AND key = ?",
                (bucket, _key_bytes(key)),
            )

    def next_sequence(self, bucket: str) -> int:
        """Advance and return the bucket's sequence number."""
        with self._lock, self._conn:
            self._ensure_bucket(bucket)
            self._conn.execute(
                "UPDATE buckets SET sequence = sequence + 1 WHERE name = ?",
                (bucket,),
            )
            (sequence,) = self._conn.execute(
                "SELECT sequence FROM buckets WHERE name = ?", (bucket,)
            ).fetchone()
        return sequence

    def items(self, bucket: str) -> list[tuple[bytes, bytes]]:
        """All key/value pairs of a bucket in byte order of the keys."""
        with self._lock:
            self._require_bucket(bucket)
            rows = self._conn.execute(
                "SELECT key, value FROM entries WHERE bucket = ? ORDER BY key",
                (bucket,),
            ).fetchall()
        return [(bytes(k), bytes(v)) for k, v in rows]

    def close(self) -> None:
        """Close the database file."""
        with self._lock:
            self._conn.close()


class DBManager:
    """Opens database files under ``<data_dir>/db`` and caches them by name."""

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        self._dbs: dict[str, LocalDB] = {}
        self._lock = threading.Lock()

    def __enter__(self) -> DBManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_db(self, db: str | bytes | Model) -> LocalDB:
        """The database named by a string, bytes or a model's ``db_name``."""
        if isinstance(db, (bytes, bytearray)):
            name = bytes(db).decode("utf-8")
        elif isinstance(db, str):
            name = db
        elif isinstance(db, Model):
            name = db.db_name
        else:
            raise TypeError("param(db) expect a string or db.Model")

        with self._lock:
            local_db = self._dbs.get(name)
            if local_db is None:
                db_dir = self.data_dir / "db"
                db_dir.mkdir(parents=True, exist_ok=True)
                local_db = LocalDB(db_dir / f"{name}.db")
                self._dbs[name] = local_db
        return local_db

    def close(self) -> None:
        """Close every cached database."""
        with self._lock:
            for local_db in self._dbs.values():
                local_db.close()
            self._dbs.clear()


def _encode(data: Any) -> bytes:
    to_json = getattr(data, "to_json", None)
    if callable(to_json):
        text = to_json()
    else:
        payload = asdict(data) if is_dataclass(data) and not isinstance(data, type) else data
        try:
            text = json.dumps(payload, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"cannot encode data: {exc}") from exc
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


class Table:
    """JSON records stored in the bucket a model names."""

    def __init__(self, manager: DBManager) -> None:
        self.manager = manager

    def _db(self, model: Model) -> LocalDB:
        return self.manager.get_db(model)

    def all_items(self, model: Model) -> list[tuple[bytes, bytes]]:
        """Every key and raw value in the model's bucket."""
        return self._db(model).items(model.table_name)

    def incr_add(self, model: Model, data: Any) -> int:
        """Store ``data`` under the next sequence id, which is set on it first."""
        local_db = self._db(model)
        record_id = local_db.next_sequence(model.table_name)
        if isinstance(data, MutableMapping):
            data["id"] = record_id
        else:
            data.id = record_id
        local_db.put(model.table_name, id_to_bin(record_id), _encode(data))
        return record_id

    def set(self, model: Model, key: Key, data: Any) -> None:
        """Store ``data`` as JSON under ``key``."""
        self._db(model).put(model.table_name, key, _encode(data))

    def set_by_id(self, model: Model, record_id: int, data: Any) -> None:
        self.set(model, id_to_bin(record_id), data)

    def set_by_kv_model(self, model: KVModel, data: Any) -> None:
        self.set(model, model.key, data)

    def delete(self, model: Model, key: Key) -> None:
        self._db(model).delete(model.table_name, key)

    def delete_by_id(self, model: Model, record_id: int) -> None:
        self.delete(model, id_to_bin(record_id))

    def delete_by_kv_model(self, model: KVModel) -> None:
        self.delete(model, model.key)

    def get(self, model: Model, key: Key) -> bytes | None:
        """Raw JSON stored under ``key``, or None."""
        return self._db(model).get(model.table_name, key)

    def get_by_id(self, model: Model, record_id: int) -> bytes | None:
        return self.get(model, id_to_bin(record_id))

    def get_by_kv_model(self, model: KVModel) -> bytes | None:
        return self.get(model, model.key)