"""
tests/validation/test_candidate_validator.py

Tests for DefaultCandidateValidator.

Each negative case breaks exactly one rule on an otherwise valid
candidate and checks the message that rule produces.
"""

import pytest

from app.core.exceptions import CandidateValidationError
from app.models.candidate_models import CandidateInput
from app.validation.candidate_validator import DefaultCandidateValidator


# ── Helpers ────────────────────────────────────────────────────────────────────

def _candidate(**overrides) -> CandidateInput:
    data = {
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "+34 612 345 678",
        "address": "Calle Mayor 1, Madrid",
        "educations": [
            {"school": "University A", "degree": "Bachelor",
             "startDate": "2010-09-01", "endDate": "2014-06-30"},
        ],
        "workExperiences": [
            {"company": "Company X", "position": "Developer",
             "description": "Backend services", "startDate": "2015-01-01"},
        ],
        "cv": {"filePath": "uploads/resume.pdf", "fileType": "application/pdf"},
    }
    data.update(overrides)
    return CandidateInput.model_validate(data)


@pytest.fixture
def validator() -> DefaultCandidateValidator:
    return DefaultCandidateValidator()


# ── Tests ──────────────────────────────────────────────────────────────────────

class TestDefaultCandidateValidator:

    def test_complete_candidate_passes(self, validator) -> None:
        validator.validate(_candidate())

    def test_minimal_candidate_passes(self, validator) -> None:
        validator.validate(CandidateInput(name="Ana", email="ana@example.org"))

    def test_accented_and_hyphenated_names_pass(self, validator) -> None:
        validator.validate(_candidate(name="José Martínez-O'Neill"))

    @pytest.mark.parametrize("name", ["", "J", "John3", "John  Doe", "x" * 101, "<script>"])
    def test_invalid_name(self, validator, name: str) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid name$"):
            validator.validate(_candidate(name=name))

    @pytest.mark.parametrize(
        "email",
        [
            "", "john", "john@", "john@example", "jo hn@example.com",
            "a@b..c", "john@example.com.", "<x>@-bad-.c",
        ],
    )
    def test_invalid_email(self, validator, email: str) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid email$"):
            validator.validate(_candidate(email=email))

    @pytest.mark.parametrize(
        "phone",
        ["12", "phone-number", "1------1", "1-2-3", "+34 612 345 678 901 234 567 890"],
    )
    def test_invalid_phone(self, validator, phone: str) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid phone$"):
            validator.validate(_candidate(phone=phone))

    @pytest.mark.parametrize("phone", ["612345678", "+34 612 345 678", "0049-30-1234567"])
    def test_valid_phone(self, validator, phone: str) -> None:
        validator.validate(_candidate(phone=phone))

    def test_email_is_normalised(self, validator) -> None:
        candidate = _candidate(email="John.Doe@EXAMPLE.com")

        result = validator.validate(candidate)

        assert result.email == "John.Doe@example.com"
        assert candidate.email == "John.Doe@EXAMPLE.com"

    def test_returns_other_fields_unchanged(self, validator) -> None:
        candidate = _candidate()

        result = validator.validate(candidate)

        assert result == candidate

    def test_invalid_address(self, validator) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid address$"):
            validator.validate(_candidate(address="a" * 101))

    def test_missing_school(self, validator) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid school$"):
            validator.validate(_candidate(educations=[{"school": " ", "degree": "BSc"}]))

    def test_too_long_degree(self, validator) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid degree$"):
            validator.validate(_candidate(educations=[{"school": "Uni", "degree": "d" * 101}]))

    def test_missing_company(self, validator) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid company$"):
            validator.validate(
                _candidate(workExperiences=[{"company": "", "position": "Developer"}])
            )

    def test_missing_position(self, validator) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid position$"):
            validator.validate(
                _candidate(workExperiences=[{"company": "Company X", "position": ""}])
            )

    def test_too_long_description(self, validator) -> None:
        experience = {"company": "Company X", "position": "Dev", "description": "d" * 201}
        with pytest.raises(CandidateValidationError, match="^Invalid description$"):
            validator.validate(_candidate(workExperiences=[experience]))

    def test_end_date_before_start_date(self, validator) -> None:
        education = {"school": "Uni", "degree": "BSc",
                     "startDate": "2014-09-01", "endDate": "2010-06-30"}
        with pytest.raises(CandidateValidationError, match="^Invalid date range$"):
            validator.validate(_candidate(educations=[education]))

    def test_invalid_cv(self, validator) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid CV data$"):
            validator.validate(_candidate(cv={"filePath": "", "fileType": "application/pdf"}))

    def test_first_broken_rule_wins(self, validator) -> None:
        with pytest.raises(CandidateValidationError, match="^Invalid name$"):
            validator.validate(_candidate(name="1", email="nope"))
