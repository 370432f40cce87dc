"""
app/api/candidate_controller.py

Handles incoming requests to POST /candidates.

This layer is responsible only for HTTP concerns:
  - Parsing the JSON body into a CandidateInput (FastAPI answers 422
    when the shape itself is wrong).
  - Delegating validation and persistence to CandidateService.
  - Translating service-level errors into appropriate HTTP responses.

Responses:
  201  Candidate stored.  Body is the saved candidate with its id.
  400  A business rule was broken (e.g. "Invalid email").
  409  The email is already registered.
  500  The database rejected the write for any other reason.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    AppBaseException,
    CandidateValidationError,
    DuplicateEmailError,
    PersistenceError,
)
from app.core.logger import get_logger
from app.models.candidate_models import CandidateInput, CandidateResponse
from app.services.candidate_service import candidate_service

logger = get_logger(__name__)

router = APIRouter(prefix="/candidates", tags=["Candidates"])


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


# ── Endpoint ───────────────────────────────────────────────────────────────────

@router.post("", response_model=CandidateResponse, status_code=201, summary="Add a candidate")
async def add_candidate(body: CandidateInput) -> JSONResponse:
    """
    Accepts a candidate with optional ``educations``, ``workExperiences``
    and ``cv`` sections. Sections that are missing or empty are skipped.
    """
    logger.info("Add-candidate request received")

    try:
        saved = await candidate_service.add_candidate(body)

    except CandidateValidationError as exc:
        logger.warning("Candidate rejected by validation: %s", exc)
        return _err(str(exc))

    except DuplicateEmailError as exc:
        return _err(str(exc), status=409)

    except PersistenceError as exc:
        logger.exception("Candidate persistence error: %s", exc)
        return _err(str(exc), status=500)

    except AppBaseException as exc:
        logger.exception("Application error while adding candidate: %s", exc)
        return _err(str(exc), status=500)

    response = CandidateResponse(
        id=saved.id,
        name=saved.name,
        email=saved.email,
        phone=saved.phone,
        address=saved.address,
    )
    return JSONResponse(status_code=201, content=response.model_dump(by_alias=True))
