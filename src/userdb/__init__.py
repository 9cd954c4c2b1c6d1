"""Database access layer for the user import — factory and public API."""

from userdb.config import ConnectionConfig
from userdb.exceptions import ConnectionFailedError, DatabaseError
from userdb.service import DatabaseService
from userdb.sqlite_service import SQLiteDatabaseService

__all__ = [
    "ConnectionConfig",
    "ConnectionFailedError",
    "DatabaseError",
    "DatabaseService",
    "create_service",
]


def create_service(config: ConnectionConfig) -> DatabaseService:
    """Create a DatabaseService for the configured driver.

    Supported drivers:
    - mysql       (default; host/port/user/password/database)
    - postgresql  (same fields)
    - sqlite      (database is a file path or :memory:)

    The service is returned unconnected; call connect() to open it.
    """
    if config.driver == "sqlite":
        return SQLiteDatabaseService(config.database)
    elif config.driver == "mysql":
        from userdb.mysql_service import MySQLDatabaseService

        return MySQLDatabaseService(config)
    elif config.driver == "postgresql":
        from userdb.postgres_service import PostgresDatabaseService

        return PostgresDatabaseService(config)
    else:
        raise ValueError(f"Unsupported database driver: {config.driver}")
