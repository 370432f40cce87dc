"""
app/services/candidate_service.py

Orchestrates the candidate intake workflow:

    CandidateInput
      └─ CandidateValidator.validate()
           └─ CandidateStore.save_candidate()      → SavedCandidate
                ├─ CandidateStore.save_education()        (per entry, if any)
                ├─ CandidateStore.save_work_experience()  (per entry, if any)
                └─ CandidateStore.save_resume()           (if cv present)

Both dependencies are constructor-injected so tests can swap them out
with mocks; the module-level singleton wires in the real production
implementations.
"""

from __future__ import annotations

from app.core.exceptions import DuplicateEmailError, PersistenceError
from app.core.logger import get_logger
from app.models.candidate_models import CandidateInput
from app.repository.base import CandidateStore, SavedCandidate
from app.repository.sql_store import SqlAlchemyCandidateStore
from app.validation.candidate_validator import CandidateValidator, DefaultCandidateValidator

logger = get_logger(__name__)


class CandidateService:
    """
    Validates and persists a candidate together with its nested sections.

    Nothing is caught locally except the duplicate-email translation:
    validation errors and any other persistence error reach the caller
    unchanged. Writes are not grouped in a transaction, so a failing
    sub-entity save leaves the candidate row in place.
    """

    def __init__(
        self,
        validator: CandidateValidator | None = None,
        store: CandidateStore | None = None,
    ) -> None:
        self._validator: CandidateValidator = validator or DefaultCandidateValidator()
        self._store: CandidateStore = store or SqlAlchemyCandidateStore()

    # ── Public API ─────────────────────────────────────────────────────────────

    async def add_candidate(self, candidate: CandidateInput) -> SavedCandidate:
        """
        Validate ``candidate`` and persist it with its optional sections.

        Args:
            candidate: Parsed request payload.

        Returns:
            The saved candidate as returned by the store (with its id).
            Its email is the normalised form produced by the validator.

        Raises:
            CandidateValidationError : The payload broke a business rule.
            DuplicateEmailError      : The email is already registered.
            PersistenceError         : Any other storage failure.
        """
        candidate = self._validator.validate(candidate)

        try:
            saved = self._store.save_candidate(candidate)
        except PersistenceError as exc:
            if exc.is_duplicate_email:
                logger.info("Rejected duplicate candidate email.")
                raise DuplicateEmailError() from exc
            raise

        if candidate.educations:
            for education in candidate.educations:
                self._store.save_education(saved.id, education)

        if candidate.work_experiences:
            for experience in candidate.work_experiences:
                self._store.save_work_experience(saved.id, experience)

        if candidate.cv:
            self._store.save_resume(saved.id, candidate.cv)

        logger.info(
            "Candidate %s saved — %d education(s), %d experience(s), cv=%s",
            saved.id,
            len(candidate.educations or []),
            len(candidate.work_experiences or []),
            "yes" if candidate.cv else "no",
        )
        return saved


# ── Module-level singleton ─────────────────────────────────────────────────────
# Controllers import this instance. Tests construct CandidateService
# directly with injected mocks.

candidate_service = CandidateService()
