"""
tests/api/test_candidate_controller.py

Tests for POST /candidates.

The module-level candidate_service is swapped for one backed by a
throw-away SQLite file, so requests run through the real validator and
store without touching the app's configured database.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

import app.api.candidate_controller as candidate_controller
from app.core.exceptions import PersistenceError
from app.repository.base import CandidateStore
from app.repository.sql_store import SqlAlchemyCandidateStore
from app.services.candidate_service import CandidateService
from app.validation.candidate_validator import DefaultCandidateValidator


@pytest.fixture
def sqlite_service(tmp_path, monkeypatch) -> CandidateService:
    service = CandidateService(
        validator=DefaultCandidateValidator(),
        store=SqlAlchemyCandidateStore(database_url=f"sqlite:///{tmp_path}/api.db"),
    )
    monkeypatch.setattr(candidate_controller, "candidate_service", service)
    return service


class TestAddCandidateEndpoint:

    def test_created_returns_saved_candidate(
        self, client: TestClient, sqlite_service, candidate_payload
    ) -> None:
        response = client.post("/candidates", json=candidate_payload)

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["name"] == "John Doe"
        assert body["email"] == "john@example.com"

    def test_minimal_candidate(self, client: TestClient, sqlite_service) -> None:
        response = client.post("/candidates", json={"name": "Ana", "email": "ana@example.org"})

        assert response.status_code == 201

    def test_duplicate_email_returns_409(
        self, client: TestClient, sqlite_service, candidate_payload
    ) -> None:
        assert client.post("/candidates", json=candidate_payload).status_code == 201

        response = client.post("/candidates", json=candidate_payload)

        assert response.status_code == 409
        assert response.json() == {"error": "The email already exists in the database"}

    def test_business_rule_violation_returns_400(
        self, client: TestClient, sqlite_service, candidate_payload
    ) -> None:
        candidate_payload["email"] = "not-an-email"

        response = client.post("/candidates", json=candidate_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email"}

    def test_missing_required_field_returns_422(self, client: TestClient, sqlite_service) -> None:
        response = client.post("/candidates", json={"email": "john@example.com"})

        assert response.status_code == 422

    def test_other_persistence_error_returns_500_with_message(
        self, client: TestClient, monkeypatch, candidate_payload
    ) -> None:
        store = MagicMock(spec=CandidateStore)
        store.save_candidate.side_effect = PersistenceError("Database connection failed")
        service = CandidateService(validator=DefaultCandidateValidator(), store=store)
        monkeypatch.setattr(candidate_controller, "candidate_service", service)

        response = client.post("/candidates", json=candidate_payload)

        assert response.status_code == 500
        assert response.json() == {"error": "Database connection failed"}

    def test_email_is_stored_normalised(
        self, client: TestClient, sqlite_service, candidate_payload
    ) -> None:
        candidate_payload["email"] = "John@EXAMPLE.com"

        response = client.post("/candidates", json=candidate_payload)

        assert response.status_code == 201
        assert response.json()["email"] == "John@example.com"

    def test_duplicate_detected_across_domain_case(
        self, client: TestClient, sqlite_service, candidate_payload
    ) -> None:
        assert client.post("/candidates", json=candidate_payload).status_code == 201
        candidate_payload["email"] = "john@EXAMPLE.COM"

        response = client.post("/candidates", json=candidate_payload)

        assert response.status_code == 409
