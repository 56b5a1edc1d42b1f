from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .kv_store import KeyValueStore


class MySQLKeyValueStore(KeyValueStore):
    """Key-value rows in the ``kv_store`` table (see database/bootstrap.py)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT v FROM kv_store WHERE k=%s", (key,))
                r = fetchone(cur)
                return r["v"] if r else None
        except mysql.connector.Error as e:
            raise StorageError(f"Gagal membaca {key!r}: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store(k, v)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE v=VALUES(v)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Gagal menyimpan {key!r}: {e}") from e
