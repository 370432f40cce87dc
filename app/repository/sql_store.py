"""
app/repository/sql_store.py

SQLAlchemy implementation of the CandidateStore interface.

Each save runs in its own short-lived session and commits on success.
All backend-specific details are fully contained here — the rest of the
application never imports from `sqlalchemy` directly.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.core.exceptions import PersistenceError, PersistenceErrorKind
from app.core.logger import get_logger
from app.db import models
from app.db.database import Base, build_engine, build_session_factory
from app.models.candidate_models import (
    CandidateInput,
    EducationInput,
    ResumeInput,
    WorkExperienceInput,
)
from app.repository.base import CandidateStore, SavedCandidate

logger = get_logger(__name__)

# Unique columns we can recognise in backend integrity messages, e.g.
#   SQLite     : "UNIQUE constraint failed: candidates.email"
#   PostgreSQL : 'duplicate key value violates unique constraint "candidates_email_key"'
_UNIQUE_COLUMNS = ("email",)


def _unique_field(exc: IntegrityError) -> Optional[str]:
    """Return the unique column named in ``exc``, or None if it is some other integrity failure."""
    message = str(exc.orig).lower()
    if "unique" not in message and "duplicate" not in message:
        return None
    for column in _UNIQUE_COLUMNS:
        if column in message:
            return column
    return None


class SqlAlchemyCandidateStore(CandidateStore):
    """
    CandidateStore backed by any SQLAlchemy-supported database.

    Tables are created on construction, so a fresh SQLite file is usable
    immediately.
    """

    def __init__(
        self,
        database_url: str | None = None,
        session_factory: sessionmaker | None = None,
    ) -> None:
        """
        Args:
            database_url    : SQLAlchemy URL. Defaults to ``settings.database_url``.
            session_factory : Pre-built factory; when given ``database_url`` is ignored.
        """
        if session_factory is None:
            self._database_url = database_url or settings.database_url
            try:
                engine = build_engine(self._database_url)
                Base.metadata.create_all(engine)
            except SQLAlchemyError as exc:
                raise PersistenceError(f"Failed to initialise database: {exc}") from exc
            session_factory = build_session_factory(engine)

        self._session_factory = session_factory

    # ── CandidateStore interface ───────────────────────────────────────────────

    def save_candidate(self, candidate: CandidateInput) -> SavedCandidate:
        row = models.Candidate(
            name=candidate.name,
            email=candidate.email,
            phone=candidate.phone,
            address=candidate.address,
        )
        self._add(row, "candidate")
        logger.debug("Saved candidate id=%s", row.id)
        return SavedCandidate(
            id=row.id,
            name=row.name,
            email=row.email,
            phone=row.phone,
            address=row.address,
        )

    def save_education(self, candidate_id: int, education: EducationInput) -> int:
        row = models.Education(
            candidate_id=candidate_id,
            school=education.school,
            degree=education.degree,
            start_date=education.start_date,
            end_date=education.end_date,
        )
        self._add(row, "education")
        return row.id

    def save_work_experience(self, candidate_id: int, experience: WorkExperienceInput) -> int:
        row = models.WorkExperience(
            candidate_id=candidate_id,
            company=experience.company,
            position=experience.position,
            description=experience.description,
            start_date=experience.start_date,
            end_date=experience.end_date,
        )
        self._add(row, "work experience")
        return row.id

    def save_resume(self, candidate_id: int, resume: ResumeInput) -> int:
        row = models.Resume(
            candidate_id=candidate_id,
            file_path=resume.file_path,
            file_type=resume.file_type,
        )
        self._add(row, "resume")
        return row.id

    # ── Internals ──────────────────────────────────────────────────────────────

    def _add(self, row: Base, label: str) -> None:
        """Insert ``row`` and commit, translating backend errors to PersistenceError."""
        with self._session_factory() as session:
            try:
                session.add(row)
                session.commit()
                session.refresh(row)
            except IntegrityError as exc:
                session.rollback()
                field = _unique_field(exc)
                if field is not None:
                    raise PersistenceError(
                        f"{label} violates unique constraint on '{field}'",
                        kind=PersistenceErrorKind.UNIQUE_VIOLATION,
                        field=field,
                    ) from exc
                raise PersistenceError(f"{label} insert failed: {exc.orig}") from exc
            except SQLAlchemyError as exc:
                session.rollback()
                raise PersistenceError(f"{label} insert failed: {exc}") from exc
