"""app/storage/__init__.py — public API of the storage package."""

from app.storage.base import FileStorage, UploadedFile
from app.storage.local_storage import LocalFileStorage

__all__ = [
    "FileStorage",
    "UploadedFile",
    "LocalFileStorage",
]
