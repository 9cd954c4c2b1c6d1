"""Exceptions raised by DatabaseService backends."""


class DatabaseError(Exception):
    """A driver-level failure, wrapped so callers never see driver exception types."""


class ConnectionFailedError(DatabaseError):
    """The single connection attempt was rejected or the host was unreachable."""
