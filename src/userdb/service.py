"""Abstract DatabaseService interface."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, Sequence

from userdb.types import Params


class DatabaseService(ABC):
    """Database-agnostic interface for all DB operations.

    Design principles:
    - Single connection: acquired by connect(), released by close()
    - Explicit boundaries: statements run inside transaction(), DDL commits on its own
    - DB-agnostic: callers program against this ABC, never a concrete backend
    """

    #: SQL dialect name, used to pick dialect-specific DDL.
    dialect: str = ""
    #: Parameter placeholder understood by the driver.
    placeholder: str = "%s"

    @abstractmethod
    def connect(self) -> None:
        """Open the connection. Raises ConnectionFailedError on failure."""

    @abstractmethod
    def close(self) -> None:
        """Close the connection. Safe to call more than once."""

    @abstractmethod
    def execute(self, sql: str, params: Params | None = None) -> list[dict[str, Any]]:
        """Execute a single SQL statement and return rows as dicts."""

    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Context manager: commits on success, rolls back on error."""

    @abstractmethod
    def execute_ddl(self, sql: str) -> None:
        """Execute DDL statements (CREATE TABLE, etc.) and commit."""

    def insert(self, table: str, columns: Sequence[str], row: Sequence[Any]) -> None:
        """Insert a single row with a parameterized statement."""
        cols = ", ".join(columns)
        placeholders = ", ".join(self.placeholder for _ in columns)
        sql = f"INSERT INTO {table} ({cols}) VALUES ({placeholders})"
        self.execute(sql, tuple(row))
