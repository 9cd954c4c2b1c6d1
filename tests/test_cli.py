"""Tests for the user_upload command line."""

import sqlite3

import pytest

from scripts import user_upload
from userdb import ConnectionFailedError


def _sqlite_args(tmp_path, *extra):
    return ["-u", "test", "-p", "test", "--driver", "sqlite", "--database", str(tmp_path / "cli.db"), *extra]


def _count_users(tmp_path) -> int:
    conn = sqlite3.connect(tmp_path / "cli.db")
    try:
        return conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]
    finally:
        conn.close()


class TestCli:
    def test_create_table_then_import(self, tmp_path, write_csv):
        csv_file = write_csv([["jane", "DOE", "Jane.Doe@EXAMPLE.com"], ["x", "y", "bad"]])
        assert user_upload.main(_sqlite_args(tmp_path, "--create_table")) == 0
        assert user_upload.main(_sqlite_args(tmp_path, "--file", str(csv_file))) == 0
        assert _count_users(tmp_path) == 1

    def test_create_table_takes_priority(self, tmp_path, write_csv):
        csv_file = write_csv([["jane", "doe", "jane@example.com"]])
        args = _sqlite_args(tmp_path, "--create_table", "--file", str(csv_file))
        assert user_upload.main(args) == 0
        assert _count_users(tmp_path) == 0

    def test_dry_run_writes_nothing(self, tmp_path, write_csv):
        csv_file = write_csv([["jane", "doe", "jane@example.com"]])
        user_upload.main(_sqlite_args(tmp_path, "--create_table"))
        assert user_upload.main(_sqlite_args(tmp_path, "-f", str(csv_file), "--dry_run")) == 0
        assert _count_users(tmp_path) == 0

    def test_no_action_does_not_connect(self, tmp_path, monkeypatch):
        def boom(config):
            raise AssertionError("should not connect")

        monkeypatch.setattr(user_upload, "create_service", boom)
        assert user_upload.main(_sqlite_args(tmp_path)) == 0

    def test_connection_failure_is_fatal(self, tmp_path, monkeypatch):
        class Unreachable:
            def connect(self):
                raise ConnectionFailedError("Can't connect to MySQL server on 'nowhere:3306'")

            def close(self):
                raise AssertionError("close() without a connection")

        monkeypatch.setattr(user_upload, "create_service", lambda config: Unreachable())
        assert user_upload.main(_sqlite_args(tmp_path, "--create_table")) == 1

    def test_unreadable_file_is_fatal(self, tmp_path):
        user_upload.main(_sqlite_args(tmp_path, "--create_table"))
        assert user_upload.main(_sqlite_args(tmp_path, "-f", str(tmp_path / "missing.csv"))) == 1

    def test_connection_closed_after_failure(self, tmp_path, monkeypatch):
        closed = []

        class Service:
            dialect = "sqlite"

            def connect(self):
                pass

            def close(self):
                closed.append(True)

        monkeypatch.setattr(user_upload, "create_service", lambda config: Service())
        assert user_upload.main(_sqlite_args(tmp_path, "-f", str(tmp_path / "missing.csv"))) == 1
        assert closed == [True]

    def test_password_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(user_upload.PASSWORD_ENV, "from-env")
        args = user_upload._parse_args(["-u", "root"])
        assert args.password == "from-env"
        assert args.host == "localhost"
        assert args.port == 3306

    def test_password_required(self, monkeypatch):
        monkeypatch.delenv(user_upload.PASSWORD_ENV, raising=False)
        with pytest.raises(SystemExit):
            user_upload._parse_args(["-u", "root"])

    def test_host_flag(self):
        args = user_upload._parse_args(["-u", "root", "-p", "x", "-h", "db.internal", "--port", "3307"])
        assert args.host == "db.internal"
        assert args.port == 3307

    def test_real_backend_connection_failure_is_fatal(self, tmp_path):
        args = ["-u", "test", "-p", "test", "--driver", "sqlite", "--database",
                str(tmp_path / "missing" / "cli.db"), "--create_table"]
        assert user_upload.main(args) == 1
