"""
app/core/constants.py

Application-wide fixed constants.

These are business rules that are part of the system's contract and are
NOT configurable via environment variables.
"""

# ── Allowed résumé types ───────────────────────────────────────────────────────

PDF_CONTENT_TYPE: str = "application/pdf"

DOCX_CONTENT_TYPE: str = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

#: Exact MIME types accepted by the upload endpoint.
ALLOWED_RESUME_CONTENT_TYPES: frozenset = frozenset({PDF_CONTENT_TYPE, DOCX_CONTENT_TYPE})

# ── Client-facing messages ─────────────────────────────────────────────────────

DUPLICATE_EMAIL_MESSAGE: str = "The email already exists in the database"

INVALID_FILE_TYPE_MESSAGE: str = "Invalid file type, only PDF and DOCX are allowed!"

NO_FILE_MESSAGE: str = "No file provided"

#: Error codes surfaced verbatim in upload error payloads.
LIMIT_FILE_SIZE: str = "LIMIT_FILE_SIZE"
LIMIT_UNEXPECTED_FILE: str = "LIMIT_UNEXPECTED_FILE"

#: Room left in a multipart body for boundaries and part headers when
#: comparing its declared Content-Length against the file size limit.
MULTIPART_OVERHEAD_BYTES: int = 16 * 1024
