"""
app/storage/local_storage.py

Local-disk implementation of the FileStorage interface.

Files are written as ``<upload_dir>/<epoch-millis>-<original name>`` so
two uploads of the same file never overwrite each other.
"""

from __future__ import annotations

import time
from pathlib import Path

from app.core.config import settings
from app.core.exceptions import UploadStorageError
from app.core.logger import get_logger
from app.storage.base import FileStorage, UploadedFile

logger = get_logger(__name__)


class LocalFileStorage(FileStorage):
    """FileStorage that writes into a directory on the local filesystem."""

    def __init__(self, upload_dir: str | None = None) -> None:
        """
        Args:
            upload_dir: Target directory, created if missing.
                        Defaults to ``settings.upload_dir``.
        """
        self._upload_dir = Path(upload_dir or settings.upload_dir)
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise UploadStorageError(
                f"Failed to create upload directory '{self._upload_dir}': {exc}"
            ) from exc

    def save(self, file: UploadedFile) -> str:
        # Drop any client-supplied directory components.
        safe_name = Path(file.original_name).name or "upload"
        target = self._upload_dir / f"{int(time.time() * 1000)}-{safe_name}"

        try:
            target.write_bytes(file.content)
        except OSError as exc:
            raise UploadStorageError(f"Failed to store '{safe_name}': {exc}") from exc

        file.stored_path = str(target)
        logger.debug("Stored %d byte(s) at %s", file.size_bytes, target)
        return file.stored_path
