"""Shared test fixtures."""

import csv
from pathlib import Path

import pytest

from userdb import ConnectionConfig, create_service


@pytest.fixture
def db_service(tmp_path):
    """Provide a fresh, connected SQLite DatabaseService for each test."""
    db_path = tmp_path / "test.db"
    service = create_service(
        ConnectionConfig(user="test", password="test", database=str(db_path), driver="sqlite")
    )
    service.connect()
    yield service
    service.close()


@pytest.fixture
def write_csv(tmp_path):
    """Write rows under a header to a CSV file and return its path."""

    def _write(rows: list[list[str]], header=("name", "surname", "email")) -> Path:
        csv_file = tmp_path / "users.csv"
        with open(csv_file, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header)
            writer.writerows(rows)
        return csv_file

    return _write
