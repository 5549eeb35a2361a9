"""
Classification of integrity errors raised by the database driver.

SQLite and PostgreSQL word their constraint messages differently, so the
checks below look at the SQLSTATE when the driver exposes one and fall back
to the message text otherwise.
"""
from typing import Iterable, Optional, Tuple

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "unique"
FOREIGN_KEY_VIOLATION = "foreign_key"

_SQLSTATES = {
    "23505": UNIQUE_VIOLATION,
    "23503": FOREIGN_KEY_VIOLATION,
}


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        value = getattr(orig, attr, None)
        if value:
            return value
    cause = getattr(orig, "__cause__", None)
    return getattr(cause, "sqlstate", None)


def classify_integrity_error(
    exc: IntegrityError, columns: Iterable[str] = ()
) -> Tuple[Optional[str], Optional[str]]:
    """
    Return (kind, column) for an integrity error.
    kind is UNIQUE_VIOLATION, FOREIGN_KEY_VIOLATION or None when unrecognised;
    column is the first of `columns` named in the error message, if any.
    """
    message = str(exc.orig).lower()

    kind = _SQLSTATES.get(_sqlstate(exc) or "")
    if kind is None:
        if "unique" in message or "duplicate key" in message:
            kind = UNIQUE_VIOLATION
        elif "foreign key" in message:
            kind = FOREIGN_KEY_VIOLATION

    column = next((c for c in columns if c.lower() in message), None)
    return kind, column
