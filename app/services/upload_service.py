"""
app/services/upload_service.py

Validates and stores a single résumé upload:

    [(field, UploadFile)]
      └─ pick the one file under the expected field
           └─ content-type allow-list (PDF / DOCX)
                └─ size limit
                     └─ FileStorage.save()   → stored path

Nothing is written to storage unless every check passes.
"""

from __future__ import annotations

from typing import List, Tuple

from fastapi import UploadFile

from app.core.config import settings
from app.core.constants import ALLOWED_RESUME_CONTENT_TYPES
from app.core.exceptions import (
    NoFileProvidedError,
    UploadFieldError,
    UploadSizeError,
    UploadTypeError,
)
from app.core.logger import get_logger
from app.models.upload_models import UploadResponse
from app.storage.base import FileStorage, UploadedFile
from app.storage.local_storage import LocalFileStorage

logger = get_logger(__name__)


class UploadService:
    """
    Gatekeeper between the multipart form and file storage.

    ``max_size_bytes`` and ``field_name`` default to the values in
    settings; tests pass smaller limits directly.
    """

    def __init__(
        self,
        storage: FileStorage | None = None,
        max_size_bytes: int | None = None,
        field_name: str | None = None,
    ) -> None:
        self._storage: FileStorage = storage or LocalFileStorage()
        self._max_size: int = max_size_bytes or settings.max_upload_size_bytes
        self._field_name: str = field_name or settings.upload_field_name

    @property
    def max_size_bytes(self) -> int:
        """Largest accepted file, in bytes."""
        return self._max_size

    # ── Public API ─────────────────────────────────────────────────────────────

    async def upload(self, files: List[Tuple[str, UploadFile]]) -> UploadResponse:
        """
        Accept exactly one PDF or DOCX file and store it.

        Args:
            files: Every (form field, UploadFile) pair found in the request.

        Returns:
            UploadResponse with the stored path and the file's MIME type.

        Raises:
            NoFileProvidedError : No file was sent.
            UploadFieldError    : A file arrived under another field, or
                                  more than one file under the expected one.
            UploadTypeError     : The content-type is not PDF or DOCX.
            UploadSizeError     : The file is larger than the limit.
            UploadStorageError  : The storage backend failed.
        """
        upload = self._select(files)

        mime_type = upload.content_type or ""
        if mime_type not in ALLOWED_RESUME_CONTENT_TYPES:
            logger.warning("Rejected '%s' — content-type %r", upload.filename, mime_type)
            raise UploadTypeError()

        # Read one byte past the limit; anything that fills it is oversize.
        content = await upload.read(self._max_size + 1)
        if len(content) > self._max_size:
            logger.warning("Rejected '%s' — larger than %d bytes", upload.filename, self._max_size)
            raise UploadSizeError()

        file = UploadedFile(
            original_name=upload.filename or "upload",
            mime_type=mime_type,
            content=content,
        )
        stored_path = self._storage.save(file)

        logger.info("Stored '%s' (%d bytes) at %s", file.original_name, file.size_bytes, stored_path)
        return UploadResponse(file_path=stored_path, file_type=file.mime_type)

    # ── Internals ──────────────────────────────────────────────────────────────

    def _select(self, files: List[Tuple[str, UploadFile]]) -> UploadFile:
        """Return the single file under the expected field."""
        if not files:
            raise NoFileProvidedError()

        unexpected = [name for name, _ in files if name != self._field_name]
        if unexpected or len(files) > 1:
            logger.warning("Unexpected file field(s): %s", unexpected or [self._field_name])
            raise UploadFieldError()

        return files[0][1]


# ── Module-level singleton ─────────────────────────────────────────────────────
# The controller imports this instance. Tests construct UploadService
# directly with a mocked storage backend.

upload_service = UploadService()
