"""
app/storage/base.py

Abstract interface for résumé file storage.

Design goals:
  - UploadService depends only on this interface, never on a concrete
    disk / bucket layout.
  - UploadedFile is the shared vocabulary between the controller, the
    service and the storage backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


# ── Shared data-transfer objects ──────────────────────────────────────────────

@dataclass
class UploadedFile:
    """
    One file taken from a multipart request.

    Attributes:
        original_name : Filename supplied by the client (e.g. "cv.pdf").
        mime_type     : Content-type supplied by the client.
        content       : Raw bytes of the file.
        stored_path   : Where the backend wrote the file — None until saved.
    """

    original_name: str
    mime_type: str
    content: bytes
    stored_path: Optional[str] = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)


# ── Abstract base ──────────────────────────────────────────────────────────────

class FileStorage(ABC):
    """Contract every file storage backend must fulfil."""

    @abstractmethod
    def save(self, file: UploadedFile) -> str:
        """
        Persist the file's bytes and return the path they were written to.

        Implementations also set ``file.stored_path``.

        Raises:
            UploadStorageError: If the bytes cannot be written.
        """
