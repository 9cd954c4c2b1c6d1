"""Tests for per-record loading."""

import logging

from ingestion.loader import load_records
from ingestion.models import UserRecord
from ingestion.schema import ensure_users_table


class TestLoadRecords:
    def test_inserts_in_order(self, db_service):
        ensure_users_table(db_service)
        records = [UserRecord("A", "B", f"u{i}@example.com") for i in range(5)]
        result = load_records(db_service, records)
        assert result.inserted == 5
        assert result.failed == []

        with db_service.transaction():
            rows = db_service.execute("SELECT email FROM users ORDER BY id")
        assert [r["email"] for r in rows] == [r.email for r in records]

    def test_duplicate_email_isolated(self, db_service, caplog):
        ensure_users_table(db_service)
        records = [
            UserRecord("First", "One", "same@example.com"),
            UserRecord("Second", "Two", "same@example.com"),
        ]
        with caplog.at_level(logging.ERROR):
            result = load_records(db_service, records)

        assert result.inserted == 1
        assert len(result.failed) == 1
        assert result.failed[0].email == "same@example.com"
        assert "Error inserting user: same@example.com" in caplog.text

        # the first insert is not rolled back
        with db_service.transaction():
            rows = db_service.execute("SELECT name FROM users")
        assert rows == [{"name": "First"}]

    def test_failure_in_middle_continues(self, db_service):
        ensure_users_table(db_service)
        records = [
            UserRecord("A", "A", "a@example.com"),
            UserRecord("B", "B", "a@example.com"),
            UserRecord("C", "C", "c@example.com"),
        ]
        result = load_records(db_service, records)
        assert result.inserted == 2
        assert [f.email for f in result.failed] == ["a@example.com"]

    def test_empty(self, db_service):
        ensure_users_table(db_service)
        result = load_records(db_service, [])
        assert result.inserted == 0
        assert result.failed == []
