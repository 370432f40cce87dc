"""app/validation/__init__.py — public API of the validation package."""

from app.validation.candidate_validator import CandidateValidator, DefaultCandidateValidator

__all__ = [
    "CandidateValidator",
    "DefaultCandidateValidator",
]
