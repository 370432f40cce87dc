"""
app/models/candidate_models.py

Pydantic DTOs for the candidate intake flow.

Wire format is camelCase (``workExperiences``, ``filePath``); attributes
are snake_case. Both spellings are accepted on input.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EducationInput(_CamelModel):
    """One education entry, e.g. ``{"school": "University A", "degree": "Bachelor"}``."""

    school: str
    degree: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class WorkExperienceInput(_CamelModel):
    """One job held by the candidate."""

    company: str
    position: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ResumeInput(_CamelModel):
    """
    A résumé that was previously stored through POST /upload.

    Same shape as the upload success payload:
        { "filePath": "uploads/1718000000000-cv.pdf", "fileType": "application/pdf" }
    """

    file_path: str
    file_type: str


class CandidateInput(_CamelModel):
    """
    JSON body for POST /candidates/.

    Only ``name`` and ``email`` are mandatory; every nested section is
    optional and is persisted only when present and non-empty.
    """

    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    educations: Optional[List[EducationInput]] = None
    work_experiences: Optional[List[WorkExperienceInput]] = None
    cv: Optional[ResumeInput] = None


class CandidateResponse(_CamelModel):
    """Successful response for POST /candidates/."""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
