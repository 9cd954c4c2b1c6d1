"""Per-record insertion into the users table."""

import logging
from typing import Iterable

from ingestion.models import InsertFailure, LoadResult, UserRecord
from ingestion.schema import USERS_COLUMNS, USERS_TABLE
from userdb import DatabaseError, DatabaseService

logger = logging.getLogger(__name__)


def load_records(service: DatabaseService, records: Iterable[UserRecord]) -> LoadResult:
    """Insert records one at a time.

    Each insert commits in its own transaction, so a failing record (most
    often a duplicate email) is rolled back alone and the rest still load.
    Nothing is retried.
    """
    result = LoadResult()
    for record in records:
        try:
            with service.transaction():
                service.insert(USERS_TABLE, USERS_COLUMNS, record.as_row())
        except DatabaseError as e:
            logger.error("Error inserting user: %s. %s", record.email, e)
            result.failed.append(InsertFailure(email=record.email, error=str(e)))
            continue
        result.inserted += 1

    logger.info(
        "Insert complete: %d inserted, %d failed", result.inserted, len(result.failed)
    )
    return result
