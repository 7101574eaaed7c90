"""Classification of persistence failures raised by the gateway."""
from __future__ import annotations

import enum

from sqlalchemy.exc import IntegrityError

# PostgreSQL SQLSTATE codes for integrity violations.
_PG_CODES = {
    "23505": "unique",
    "23514": "check",
    "23503": "foreign_key",
    "23502": "not_null",
}

# SQLite reports the constraint kind in the message only.
_MESSAGE_MARKERS = (
    ("unique constraint", "unique"),
    ("duplicate key", "unique"),
    ("check constraint", "check"),
    ("foreign key constraint", "foreign_key"),
    ("not null constraint", "not_null"),
    ("violates not-null", "not_null"),
)


class ConstraintKind(str, enum.Enum):
    UNIQUE = "unique"
    CHECK = "check"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    UNKNOWN = "unknown"


def classify_integrity_error(exc: IntegrityError) -> ConstraintKind:
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code in _PG_CODES:
        return ConstraintKind(_PG_CODES[code])

    message = str(orig if orig is not None else exc).lower()
    for marker, kind in _MESSAGE_MARKERS:
        if marker in message:
            return ConstraintKind(kind)
    return ConstraintKind.UNKNOWN
