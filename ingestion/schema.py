"""Users table schema."""

import logging

from userdb import DatabaseError, DatabaseService

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
USERS_COLUMNS = ["name", "surname", "email"]

_ID_COLUMN = {
    "mysql": "id INT AUTO_INCREMENT PRIMARY KEY",
    "postgresql": "id SERIAL PRIMARY KEY",
    "sqlite": "id INTEGER PRIMARY KEY AUTOINCREMENT",
}

USERS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS users (
    {id_column},
    name          VARCHAR(255),
    surname       VARCHAR(255),
    email         VARCHAR(255) UNIQUE
);
"""


def users_table_ddl(dialect: str) -> str:
    """Return the CREATE TABLE IF NOT EXISTS statement for a backend dialect."""
    try:
        id_column = _ID_COLUMN[dialect]
    except KeyError:
        raise ValueError(f"No users table DDL for dialect: {dialect}") from None
    return USERS_TABLE_DDL.format(id_column=id_column)


def ensure_users_table(service: DatabaseService) -> bool:
    """Create the users table if it doesn't exist.

    Idempotent: an existing table and its rows are left untouched. A database
    failure (e.g. missing privileges) is logged and reported as False rather
    than raised.
    """
    try:
        service.execute_ddl(users_table_ddl(service.dialect))
    except DatabaseError as e:
        logger.error("Error creating table %s: %s", USERS_TABLE, e)
        return False
    logger.info("Table %s is present (created if it was missing).", USERS_TABLE)
    return True
