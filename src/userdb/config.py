"""Connection configuration, built once at startup and passed explicitly."""

from dataclasses import dataclass

DEFAULT_DRIVER = "mysql"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3306
DATABASE_NAME = "user_upload_db"


@dataclass(frozen=True)
class ConnectionConfig:
    user: str
    password: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    database: str = DATABASE_NAME
    driver: str = DEFAULT_DRIVER

    def __repr__(self) -> str:
        # keep the password out of logs
        return (
            f"ConnectionConfig(driver={self.driver!r}, host={self.host!r}, "
            f"port={self.port!r}, user={self.user!r}, database={self.database!r})"
        )
