"""Row normalization: RawRow -> UserRecord or Rejection."""

from ingestion.models import RawRow, Rejection, RejectionReason, UserRecord
from ingestion.validation import validate_email

NAME_FIELDS = ("name", "surname")


def capitalize(value: str) -> str:
    """Upper-case the first character, lower-case the rest ("jOHN" -> "John")."""
    return value[:1].upper() + value[1:].lower()


def normalize_row(row: RawRow, row_num: int | None = None) -> UserRecord | Rejection:
    """Normalize and validate one CSV row.

    Never raises for bad data: an unusable row comes back as a Rejection.
    """
    for field in (*NAME_FIELDS, "email"):
        if row.get(field) is None:
            return Rejection(RejectionReason.MISSING_FIELD, field, None, row_num)

    for field in NAME_FIELDS:
        if row[field] == "":
            return Rejection(RejectionReason.EMPTY_FIELD, field, "", row_num)

    name = capitalize(row["name"])
    surname = capitalize(row["surname"])
    email = row["email"].lower()

    if not validate_email(email):
        return Rejection(RejectionReason.INVALID_EMAIL_FORMAT, "email", email, row_num)

    return UserRecord(name=name, surname=surname, email=email)
