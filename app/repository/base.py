"""
app/repository/base.py

Abstract interface for the candidate persistence layer.

Design goals:
  - CandidateService depends only on this interface, never on SQLAlchemy.
  - Failures are reported as PersistenceError with an explicit
    PersistenceErrorKind, so callers never match on backend error codes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from app.models.candidate_models import (
    CandidateInput,
    EducationInput,
    ResumeInput,
    WorkExperienceInput,
)


# ── Shared data-transfer objects ──────────────────────────────────────────────

@dataclass
class SavedCandidate:
    """
    A candidate row as it exists after a successful save.

    Attributes:
        id      : Identifier generated by the backend.
        name    : Full name.
        email   : Unique contact email.
        phone   : Optional phone number.
        address : Optional postal address.
    """

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None


# ── Abstract base ──────────────────────────────────────────────────────────────

class CandidateStore(ABC):
    """
    Contract every candidate persistence backend must fulfil.

    Every ``save_*`` call is an independent write; no method groups
    several writes into one transaction.
    """

    @abstractmethod
    def save_candidate(self, candidate: CandidateInput) -> SavedCandidate:
        """
        Persist the candidate's own fields (nested sections are ignored).

        Returns:
            The saved candidate, enriched with its generated id.

        Raises:
            PersistenceError: kind=UNIQUE_VIOLATION, field="email" when the
                              email is already taken; kind=OTHER otherwise.
        """

    @abstractmethod
    def save_education(self, candidate_id: int, education: EducationInput) -> int:
        """
        Persist one education entry for ``candidate_id``.

        Returns:
            The id of the new row.

        Raises:
            PersistenceError: If the backend operation fails.
        """

    @abstractmethod
    def save_work_experience(self, candidate_id: int, experience: WorkExperienceInput) -> int:
        """
        Persist one work experience entry for ``candidate_id``.

        Returns:
            The id of the new row.

        Raises:
            PersistenceError: If the backend operation fails.
        """

    @abstractmethod
    def save_resume(self, candidate_id: int, resume: ResumeInput) -> int:
        """
        Persist the résumé reference for ``candidate_id``.

        Returns:
            The id of the new row.

        Raises:
            PersistenceError: If the backend operation fails.
        """
