"""
app/api/upload_controller.py

Handles incoming requests to POST /upload.

This layer is responsible only for HTTP concerns:
  - Parsing the multipart form and collecting every uploaded file
    together with the field it arrived under.
  - Delegating the type / size checks and storage to UploadService.
  - Translating every outcome into exactly one JSON response. Nothing
    raised here is allowed to escape the endpoint.

Responses:
  200  { "filePath": ..., "fileType": ... }
  400  No file was sent, or the file is not a PDF / DOCX.
  500  { "error": "LIMIT_FILE_SIZE" }        file too large
       { "error": "LIMIT_UNEXPECTED_FILE" }  file under an unexpected field
       { "error": "<message>" }              any other failure
"""

from typing import List, Tuple

from fastapi import APIRouter, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.core.constants import LIMIT_FILE_SIZE, MULTIPART_OVERHEAD_BYTES
from app.core.exceptions import (
    NoFileProvidedError,
    UploadFieldError,
    UploadSizeError,
    UploadTypeError,
)
from app.core.logger import get_logger
from app.models.upload_models import UploadResponse
from app.services.upload_service import upload_service

logger = get_logger(__name__)

router = APIRouter(prefix="/upload", tags=["Upload"])


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


def _declared_length(request: Request) -> int:
    """Content-Length sent by the client, or 0 when absent or unparseable."""
    value = request.headers.get("content-length", "")
    return int(value) if value.isdigit() else 0


# ── Endpoint ───────────────────────────────────────────────────────────────────

@router.post("", response_model=UploadResponse, summary="Upload a résumé (PDF or DOCX)")
async def upload_file(request: Request) -> JSONResponse:
    """
    Accepts a single file in the ``file`` form field:

        curl -F "file=@resume.pdf" http://localhost:8000/upload
    """
    # ── 1. Reject bodies that cannot fit under the size limit ─────────────────
    # request.form() spools every file part in full, so oversize bodies are
    # turned away on their declared length before any parsing happens.
    if _declared_length(request) > upload_service.max_size_bytes + MULTIPART_OVERHEAD_BYTES:
        logger.warning(
            "Rejected upload before parsing — Content-Length %s exceeds limit",
            request.headers.get("content-length"),
        )
        return _err(LIMIT_FILE_SIZE, status=500)

    # ── 2. Parse multipart form ────────────────────────────────────────────────
    try:
        form = await request.form()
    except Exception as exc:  # noqa: BLE001
        logger.warning("Could not parse multipart body: %s", exc)
        return _err(str(exc) or "Invalid multipart/form-data payload.", status=500)

    files: List[Tuple[str, UploadFile]] = [
        (key, value)
        for key, value in form.multi_items()
        if isinstance(value, StarletteUploadFile)
    ]

    # ── 3. Delegate to service ─────────────────────────────────────────────────
    try:
        result = await upload_service.upload(files)

    except (NoFileProvidedError, UploadTypeError) as exc:
        return _err(str(exc))

    except (UploadSizeError, UploadFieldError) as exc:
        return _err(str(exc), status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Upload failed: %s", exc)
        return _err(str(exc) or "Upload failed.", status=500)

    finally:
        await form.close()

    return JSONResponse(status_code=200, content=result.model_dump(by_alias=True))
