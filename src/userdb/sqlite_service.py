"""SQLite implementation of DatabaseService."""

import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator

from userdb.exceptions import ConnectionFailedError, DatabaseError
from userdb.service import DatabaseService
from userdb.types import Params


class SQLiteDatabaseService(DatabaseService):
    """SQLite backend using stdlib sqlite3.

    Holds one connection for the lifetime of the run. Mostly used by the
    test suite and for local dry runs against a scratch file.
    """

    dialect = "sqlite"
    placeholder = "?"

    def __init__(self, db_path: str):
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._in_transaction = False

    def connect(self) -> None:
        try:
            conn = sqlite3.connect(self._db_path)
        except sqlite3.Error as e:
            raise ConnectionFailedError(str(e)) from e
        conn.row_factory = sqlite3.Row
        self._conn = conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _get_conn(self) -> sqlite3.Connection:
        """Get the connection for the current transaction."""
        if self._conn is not None and self._in_transaction:
            return self._conn
        raise RuntimeError(
            "No active transaction. Wrap calls in a `with service.transaction():` block."
        )

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Not connected. Call connect() first.")
        return self._conn

    @contextmanager
    def transaction(self) -> Iterator[None]:
        conn = self._require_conn()
        self._in_transaction = True
        try:
            yield
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._in_transaction = False

    def execute(self, sql: str, params: Params | None = None) -> list[dict[str, Any]]:
        conn = self._get_conn()
        try:
            cursor = conn.execute(sql, params or ())
            if cursor.description is None:
                return []
            columns = [desc[0] for desc in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise DatabaseError(str(e)) from e

    def execute_ddl(self, sql: str) -> None:
        conn = self._require_conn()
        try:
            conn.executescript(sql)
            conn.commit()
        except sqlite3.Error as e:
            raise DatabaseError(str(e)) from e
