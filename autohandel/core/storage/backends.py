"""Key-value backends behind the storage abstraction.

- PostgresKVBackend: primary backend, one JSONB row per key in ``kv_store``.
- LocalStore: local persistent fallback. Values are kept as JSON strings in a
  SQLite file under a prefixed key, the same way browser local storage holds
  them.
"""
import json
import logging
import sqlite3
import threading
from typing import Any, Optional

from psycopg2.extras import Json

from database import get_db, get_cursor, release_db

logger = logging.getLogger('autohandel.storage.backends')


class PostgresKVBackend:
    """Primary key-value backend stored in PostgreSQL."""

    def get(self, key: str) -> Any:
        conn = get_db()
        try:
            cursor = get_cursor(conn)
            cursor.execute('SELECT value FROM kv_store WHERE key = %s', (key,))
            row = cursor.fetchone()
            return row['value'] if row else None
        finally:
            release_db(conn)

    def set(self, key: str, value: Any) -> None:
        conn = get_db()
        try:
            cursor = get_cursor(conn)
            cursor.execute('''
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (%s, %s, CURRENT_TIMESTAMP)
                ON CONFLICT (key) DO UPDATE
                SET value = EXCLUDED.value, updated_at = CURRENT_TIMESTAMP
            ''', (key, Json(value)))
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            release_db(conn)

    def delete(self, key: str) -> None:
        conn = get_db()
        try:
            cursor = get_cursor(conn)
            cursor.execute('DELETE FROM kv_store WHERE key = %s', (key,))
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            release_db(conn)


class LocalStore:
    """Local persistent string store with a JSON layer on top.

    ``get_item``/``set_item``/``remove_item`` work on raw strings under the
    prefixed key; ``get``/``set``/``delete`` add JSON (de)serialization.
    """

    def __init__(self, path: str = 'autohandel_local.db', prefix: str = 'kv_'):
        self.path = path
        self.prefix = prefix
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(path, check_same_thread=False)
        with self._lock:
            self._conn.execute('''
                CREATE TABLE IF NOT EXISTS local_storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            ''')
            self._conn.commit()

    def _prefixed(self, key: str) -> str:
        return f'{self.prefix}{key}'

    # ---- raw string API ----

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            row = self._conn.execute(
                'SELECT value FROM local_storage WHERE key = ?', (self._prefixed(key),)
            ).fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._conn.execute(
                'INSERT OR REPLACE INTO local_storage (key, value) VALUES (?, ?)',
                (self._prefixed(key), value)
            )
            self._conn.commit()

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._conn.execute(
                'DELETE FROM local_storage WHERE key = ?', (self._prefixed(key),)
            )
            self._conn.commit()

    # ---- JSON API ----

    def get(self, key: str) -> Any:
        stored = self.get_item(key)
        return json.loads(stored) if stored else None

    def set(self, key: str, value: Any) -> None:
        self.set_item(key, json.dumps(value))

    def delete(self, key: str) -> None:
        self.remove_item(key)

    def close(self):
        with self._lock:
            self._conn.close()
