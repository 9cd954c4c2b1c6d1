"""CSV user import: normalization, validation and per-record loading."""

from ingestion.csv_ingest import IngestionError, ingest_csv, read_rows
from ingestion.loader import load_records
from ingestion.models import (
    ImportResult,
    InsertFailure,
    Rejection,
    RejectionReason,
    UserRecord,
)
from ingestion.normalize import capitalize, normalize_row
from ingestion.schema import ensure_users_table
from ingestion.validation import validate_email

__all__ = [
    "ImportResult",
    "IngestionError",
    "InsertFailure",
    "Rejection",
    "RejectionReason",
    "UserRecord",
    "capitalize",
    "ensure_users_table",
    "ingest_csv",
    "load_records",
    "normalize_row",
    "read_rows",
    "validate_email",
]
