from sqlalchemy.exc import IntegrityError

# Driver messages raised on a unique index violation
UNIQUE_VIOLATION_MARKERS = (
    "UNIQUE constraint failed",  # SQLite
    "duplicate key value violates unique constraint",  # PostgreSQL
)


class SignupConflictError(Exception):
    """Raised when a signup collides with an already registered email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Signup already exists for {email}")


def is_unique_violation(error: IntegrityError) -> bool:
    """Check whether an integrity error was caused by a unique constraint."""
    message = str(error.orig) if error.orig is not None else str(error)
    return any(marker in message for marker in UNIQUE_VIOLATION_MARKERS)


class MalformedBodyError(ValueError):
    """Raised when a request body is not strict JSON."""
