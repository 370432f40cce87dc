"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
The database and upload directory are pointed at a throw-away temp dir
before the app (and its settings singleton) is imported.
"""

import io
import os
import tempfile

_TEST_ROOT = tempfile.mkdtemp(prefix="candidate-api-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TEST_ROOT}/candidates.db")
os.environ.setdefault("UPLOAD_DIR", f"{_TEST_ROOT}/uploads")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.constants import DOCX_CONTENT_TYPE, PDF_CONTENT_TYPE  # noqa: E402
from app.main import app  # noqa: E402


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    A synchronous TestClient wrapping the FastAPI app.

    session-scoped so the app is instantiated once per test run.
    Controller tests swap the module-level services with monkeypatch.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Candidate payload fixtures ─────────────────────────────────────────────────

@pytest.fixture
def candidate_payload() -> dict:
    """A complete candidate body in wire (camelCase) format."""
    return {
        "name": "John Doe",
        "email": "john@example.com",
        "educations": [{"school": "University A", "degree": "Bachelor"}],
        "workExperiences": [{"company": "Company X", "position": "Developer"}],
        "cv": {"filePath": "uploads/1718000000000-resume.pdf", "fileType": PDF_CONTENT_TYPE},
    }


# ── Sample file fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Minimal PDF header bytes; enough for content-type checks."""
    return b"%PDF-1.4\n%%EOF"


@pytest.fixture
def sample_pdf_file(sample_pdf_bytes) -> tuple:
    """
    A (field_name, (filename, file_obj, content_type)) tuple ready for
    use with TestClient's `files=` parameter.
    """
    return ("file", ("original.pdf", io.BytesIO(sample_pdf_bytes), PDF_CONTENT_TYPE))


@pytest.fixture
def sample_docx_file() -> tuple:
    """A DOCX upload tuple (a DOCX is a zip, hence the PK header)."""
    return ("file", ("original.docx", io.BytesIO(b"PK\x03\x04docx"), DOCX_CONTENT_TYPE))


@pytest.fixture
def sample_txt_file() -> tuple:
    """A non-résumé upload tuple for negative-case tests."""
    return ("file", ("readme.txt", io.BytesIO(b"hello world"), "text/plain"))
