"""
app/main.py

Entry point of the candidate intake API.

The app serves two independent endpoints:
  POST /candidates  validate and store a candidate with its education,
                    work experience and résumé reference
  POST /upload      accept a PDF or DOCX résumé and return where it was stored

plus GET /health for liveness probes. Any AppBaseException that a
controller lets through is turned into a 500 { "error": ... } response.

Run locally with:

    uvicorn app.main:app --reload
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.candidate_controller import router as candidate_router
from app.api.upload_controller import router as upload_router
from app.core.config import settings
from app.core.exceptions import AppBaseException
from app.core.logger import get_logger

logger = get_logger(__name__)

# ── App instance ───────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Registers recruiting candidates with their education, work "
        "experience and résumé, and accepts PDF / DOCX résumé uploads."
    ),
)

# ── Routers ────────────────────────────────────────────────────────────────────

app.include_router(candidate_router)
app.include_router(upload_router)

# ── Global exception handler ───────────────────────────────────────────────────

@app.exception_handler(AppBaseException)
async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
    """
    Safety-net for any AppBaseException that escapes controller-level handling.
    Returns the standard error shape: { "error": "..." }
    """
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


# ── Health endpoint ────────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"], summary="Liveness probe")
async def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {"status": "ok", "version": settings.app_version}
