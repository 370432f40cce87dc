"""
app/validation/candidate_validator.py

Business-rule validation for candidate payloads.

Pydantic only guarantees the payload's shape (types, required keys,
parseable dates); the rules here cover content. The first violated rule
raises CandidateValidationError with a short, client-facing message.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from app.core.exceptions import CandidateValidationError
from app.models.candidate_models import (
    CandidateInput,
    EducationInput,
    ResumeInput,
    WorkExperienceInput,
)

NAME_PATTERN = re.compile(r"^[^\W\d_]+(?:[ '\-][^\W\d_]+)*$")
PHONE_PATTERN = re.compile(r"^\+?[0-9]+(?:[ \-][0-9]+)*$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
FIELD_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 200
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 20


class CandidateValidator(ABC):
    """Contract for the validation step of the candidate intake workflow."""

    @abstractmethod
    def validate(self, candidate: CandidateInput) -> CandidateInput:
        """
        Check ``candidate`` and return the version to persist.

        Implementations may return a normalised copy (e.g. a canonical
        email address); the input itself is never modified.

        Raises:
            CandidateValidationError: On the first rule that fails.
        """


def _bounded(value: Optional[str], max_length: int, required: bool = True) -> bool:
    if value is None or not value.strip():
        return not required
    return len(value) <= max_length


def _check_dates(start: Optional[date], end: Optional[date]) -> None:
    if start and end and end < start:
        raise CandidateValidationError("Invalid date range")


class DefaultCandidateValidator(CandidateValidator):

    def validate(self, candidate: CandidateInput) -> CandidateInput:
        self._validate_name(candidate.name)
        email = self._normalise_email(candidate.email)
        self._validate_phone(candidate.phone)

        if not _bounded(candidate.address, FIELD_MAX_LENGTH, required=False):
            raise CandidateValidationError("Invalid address")

        for education in candidate.educations or []:
            self._validate_education(education)
        for experience in candidate.work_experiences or []:
            self._validate_experience(experience)
        if candidate.cv is not None:
            self._validate_cv(candidate.cv)

        return candidate.model_copy(update={"email": email})

    # ── Field rules ────────────────────────────────────────────────────────────

    @staticmethod
    def _validate_name(name: str) -> None:
        stripped = (name or "").strip()
        if not NAME_MIN_LENGTH <= len(stripped) <= NAME_MAX_LENGTH:
            raise CandidateValidationError("Invalid name")
        if not NAME_PATTERN.match(stripped):
            raise CandidateValidationError("Invalid name")

    @staticmethod
    def _normalise_email(email: str) -> str:
        if not email:
            raise CandidateValidationError("Invalid email")
        try:
            return validate_email(email, check_deliverability=False).normalized
        except EmailNotValidError as exc:
            raise CandidateValidationError("Invalid email") from exc

    @staticmethod
    def _validate_phone(phone: Optional[str]) -> None:
        if phone is None:
            return
        digits = sum(ch.isdigit() for ch in phone)
        if not PHONE_PATTERN.match(phone) or not PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS:
            raise CandidateValidationError("Invalid phone")

    @staticmethod
    def _validate_education(education: EducationInput) -> None:
        if not _bounded(education.school, FIELD_MAX_LENGTH):
            raise CandidateValidationError("Invalid school")
        if not _bounded(education.degree, FIELD_MAX_LENGTH):
            raise CandidateValidationError("Invalid degree")
        _check_dates(education.start_date, education.end_date)

    @staticmethod
    def _validate_experience(experience: WorkExperienceInput) -> None:
        if not _bounded(experience.company, FIELD_MAX_LENGTH):
            raise CandidateValidationError("Invalid company")
        if not _bounded(experience.position, FIELD_MAX_LENGTH):
            raise CandidateValidationError("Invalid position")
        if not _bounded(experience.description, DESCRIPTION_MAX_LENGTH, required=False):
            raise CandidateValidationError("Invalid description")
        _check_dates(experience.start_date, experience.end_date)

    @staticmethod
    def _validate_cv(cv: ResumeInput) -> None:
        if not cv.file_path.strip() or not cv.file_type.strip():
            raise CandidateValidationError("Invalid CV data")
