"""MySQL implementation of DatabaseService."""

from contextlib import contextmanager
from typing import Any, Iterator

import mysql.connector

from userdb.config import ConnectionConfig
from userdb.exceptions import ConnectionFailedError, DatabaseError
from userdb.service import DatabaseService
from userdb.types import Params


class MySQLDatabaseService(DatabaseService):
    """MySQL backend using mysql-connector-python.

    Holds one connection; each transaction() call commits or rolls back
    that connection on exit.
    """

    dialect = "mysql"
    placeholder = "%s"

    def __init__(self, config: ConnectionConfig):
        self._config = config
        self._conn = None
        self._in_transaction = False

    def connect(self) -> None:
        try:
            conn = mysql.connector.connect(
                host=self._config.host,
                port=self._config.port,
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error as e:
            raise ConnectionFailedError(str(e)) from e
        conn.autocommit = False
        self._conn = conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _get_conn(self):
        if self._conn is not None and self._in_transaction:
            return self._conn
        raise RuntimeError(
            "No active transaction. Wrap calls in a `with service.transaction():` block."
        )

    def _require_conn(self):
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
        cur = conn.cursor(dictionary=True)
        try:
            cur.execute(sql, params or ())
            if cur.description is None:
                return []
            return [dict(row) for row in cur.fetchall()]
        except mysql.connector.Error as e:
            raise DatabaseError(str(e)) from e
        finally:
            cur.close()

    def execute_ddl(self, sql: str) -> None:
        conn = self._require_conn()
        cur = conn.cursor()
        try:
            for statement in sql.split(";"):
                statement = statement.strip()
                if statement:
                    cur.execute(statement)
            conn.commit()
        except mysql.connector.Error as e:
            conn.rollback()
            raise DatabaseError(str(e)) from e
        finally:
            cur.close()
