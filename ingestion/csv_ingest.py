"""Streaming CSV ingestion into the users table."""

import csv
import logging
from pathlib import Path
from typing import Iterator

from ingestion.loader import load_records
from ingestion.models import ImportResult, RawRow, Rejection
from ingestion.normalize import normalize_row
from userdb import DatabaseService

logger = logging.getLogger(__name__)

REQUIRED_HEADERS = ("name", "surname", "email")


class IngestionError(Exception):
    """The CSV source could not be read as a whole; the run cannot continue."""


def read_rows(file_path: str | Path) -> Iterator[tuple[int, RawRow]]:
    """Yield (line number, row) pairs from a CSV file.

    Never loads the full file into memory: rows are read and yielded one at a
    time. The header must contain name, surname and email (exact,
    case-sensitive); extra columns are ignored.
    """
    try:
        with open(file_path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f, strict=True)
            if reader.fieldnames is None:
                raise IngestionError(f"{file_path}: file is empty, expected a header row")
            missing = [h for h in REQUIRED_HEADERS if h not in reader.fieldnames]
            if missing:
                raise IngestionError(
                    f"{file_path}: header is missing column(s): {', '.join(missing)}"
                )
            for row in reader:
                yield reader.line_num, row
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        raise IngestionError(f"Error reading the CSV file {file_path}: {e}") from e


def ingest_csv(
    service: DatabaseService | None,
    file_path: str | Path,
    dry_run: bool = False,
) -> ImportResult:
    """Validate, normalize and (unless dry_run) insert every row of a CSV file.

    Accepted records keep the file's row order. Rejected rows are logged and
    skipped. In dry-run mode the database is never touched and service may be
    None. Raises IngestionError if the file itself can't be read; in that case
    nothing is inserted.
    """
    if service is None and not dry_run:
        raise ValueError("A DatabaseService is required unless dry_run is set")

    result = ImportResult(dry_run=dry_run)

    for row_num, row in read_rows(file_path):
        outcome = normalize_row(row, row_num)
        if isinstance(outcome, Rejection):
            logger.warning(
                "Skipping row %d: %s (%s=%r)",
                row_num,
                outcome.reason.value,
                outcome.field,
                outcome.value,
            )
            result.rejected.append(outcome)
            continue
        result.records.append(outcome)

    logger.info(
        "Parsed %s: %d valid, %d rejected",
        file_path,
        len(result.records),
        len(result.rejected),
    )

    if dry_run:
        logger.info("Dry run mode: no data inserted into the database.")
        for record in result.records:
            logger.info("  %s %s <%s>", record.name, record.surname, record.email)
        return result

    loaded = load_records(service, list(result.records))
    result.inserted = loaded.inserted
    result.failed = loaded.failed
    logger.info(
        "Ingestion complete: %d inserted, %d rejected, %d failed",
        result.inserted,
        len(result.rejected),
        len(result.failed),
    )
    return result
