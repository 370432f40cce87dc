"""app/repository/__init__.py — public API of the repository package."""

from app.repository.base import CandidateStore, SavedCandidate
from app.repository.sql_store import SqlAlchemyCandidateStore

__all__ = [
    "CandidateStore",
    "SavedCandidate",
    "SqlAlchemyCandidateStore",
]
