"""
app/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from app.core.constants import (
    DUPLICATE_EMAIL_MESSAGE,
    INVALID_FILE_TYPE_MESSAGE,
    LIMIT_FILE_SIZE,
    LIMIT_UNEXPECTED_FILE,
    NO_FILE_MESSAGE,
)


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Candidate exceptions ───────────────────────────────────────────────────────

class CandidateValidationError(AppBaseException):
    """Raised when a candidate payload breaks a business rule."""


class PersistenceErrorKind(str, Enum):
    """What went wrong inside the persistence layer."""

    UNIQUE_VIOLATION = "unique_violation"
    OTHER = "other"


class PersistenceError(AppBaseException):
    """
    Raised when the candidate store fails to write a record.

    Attributes:
        kind  : Classification of the failure.
        field : Column that caused the failure, when the backend reports one.
    """

    def __init__(
        self,
        message: str,
        kind: PersistenceErrorKind = PersistenceErrorKind.OTHER,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field

    @property
    def is_duplicate_email(self) -> bool:
        return self.kind is PersistenceErrorKind.UNIQUE_VIOLATION and self.field == "email"


class DuplicateEmailError(PersistenceError):
    """Raised when a candidate is saved with an email that already exists."""

    def __init__(self) -> None:
        super().__init__(
            DUPLICATE_EMAIL_MESSAGE,
            kind=PersistenceErrorKind.UNIQUE_VIOLATION,
            field="email",
        )


# ── Upload exceptions ──────────────────────────────────────────────────────────

class UploadError(AppBaseException):
    """Base class for every rejection produced by the upload endpoint."""


class NoFileProvidedError(UploadError):
    """Raised when the request carries no file at all."""

    def __init__(self) -> None:
        super().__init__(NO_FILE_MESSAGE)


class UploadTypeError(UploadError):
    """Raised when the uploaded file is neither PDF nor DOCX."""

    def __init__(self) -> None:
        super().__init__(INVALID_FILE_TYPE_MESSAGE)


class UploadSizeError(UploadError):
    """Raised when the uploaded file exceeds the configured size limit."""

    def __init__(self) -> None:
        super().__init__(LIMIT_FILE_SIZE)


class UploadFieldError(UploadError):
    """Raised when a file arrives under an unexpected form field."""

    def __init__(self) -> None:
        super().__init__(LIMIT_UNEXPECTED_FILE)


class UploadStorageError(UploadError):
    """Raised when an accepted file cannot be written to storage."""
