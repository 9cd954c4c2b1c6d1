"""Record types produced and consumed by the import pipeline."""

from dataclasses import dataclass, field
from enum import Enum

from ingestion.validation import validate_email

RawRow = dict[str, str | None]


class RejectionReason(str, Enum):
    MISSING_FIELD = "MissingField"
    EMPTY_FIELD = "EmptyField"
    INVALID_EMAIL_FORMAT = "InvalidEmailFormat"


@dataclass(frozen=True)
class UserRecord:
    """A validated, normalized user ready for insertion.

    The email is checked on construction, so an instance with an invalid
    email cannot exist.
    """

    name: str
    surname: str
    email: str

    def __post_init__(self) -> None:
        if not validate_email(self.email):
            raise ValueError(f"Invalid email format: {self.email}")

    def as_row(self) -> tuple[str, str, str]:
        """Values in USERS_COLUMNS order."""
        return (self.name, self.surname, self.email)


@dataclass(frozen=True)
class Rejection:
    reason: RejectionReason
    field: str
    value: str | None
    row_num: int | None = None


@dataclass(frozen=True)
class InsertFailure:
    email: str
    error: str


@dataclass
class LoadResult:
    inserted: int = 0
    failed: list[InsertFailure] = field(default_factory=list)


@dataclass
class ImportResult:
    """Accumulated outcome of one import run."""

    dry_run: bool = False
    records: list[UserRecord] = field(default_factory=list)
    rejected: list[Rejection] = field(default_factory=list)
    failed: list[InsertFailure] = field(default_factory=list)
    inserted: int = 0
