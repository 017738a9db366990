from __future__ import annotations

import json
from typing import Any, Iterable, Optional

from .connection import DatabaseConnection
from .kv_store import KeyValueStore
from .mysql_base import db_cursor, fetchall


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so a key prefix is matched literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _decode(raw: Any) -> Any:
    # mysql-connector returns JSON columns as str or bytes depending on version.
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    return json.loads(raw)


class MySQLKeyValueStore(KeyValueStore):
    """Key-value table in MySQL: one row per key, value stored as JSON."""

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = "kv_store"):
        self._conn_factory = conn_factory
        self._table = table

    def get(self, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT `value` FROM `{self._table}` WHERE `key`=%s", (key,))
            row = cur.fetchone()
            if not row:
                return None
            return _decode(row["value"])

    def set(self, key: str, value: Any) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO `{self._table}`(`key`, `value`)
                VALUES(%s, %s)
                ON DUPLICATE KEY UPDATE `value`=VALUES(`value`)
                """,
                (key, json.dumps(value, ensure_ascii=False)),
            )

    def delete(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{self._table}` WHERE `key`=%s", (key,))

    def delete_many(self, keys: Iterable[str]) -> None:
        keys = list(keys)
        if not keys:
            return
        placeholders = ",".join(["%s"] * len(keys))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{self._table}` WHERE `key` IN ({placeholders})", tuple(keys))

    def list_by_prefix(self, prefix: str) -> list[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT `value` FROM `{self._table}` WHERE `key` LIKE %s",
                (escape_like(prefix) + "%",),
            )
            return [_decode(r["value"]) for r in fetchall(cur)]
