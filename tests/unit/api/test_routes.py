"""Tests for the HTTP API using FastAPI's TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from idverify.api.app import create_app
from idverify.core.config import AppSettings
from idverify.services import IdValidationService
from idverify.telemetry.recorder import TelemetryRecorder
from tests.fakes import FailingTelemetryStore, MemoryTelemetryStore, MockHomeAffairsClient


@pytest.fixture
def client():
    service = IdValidationService(
        home_affairs=MockHomeAffairsClient(),
        telemetry=TelemetryRecorder(MemoryTelemetryStore()),
    )
    with TestClient(create_app(settings=AppSettings(), service=service)) as test_client:
        yield test_client


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_ready_reports_wiring(client):
    body = client.get("/ready").json()
    assert body["status"] == "ready"
    assert body["home_affairs_provider"] == "mock"


class TestValidate:
    def test_valid_id(self, client):
        resp = client.post("/validate", json={"id_number": "9001085012085"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["formatted"] == "900108 5012 085"
        result = body["result"]
        assert result["is_valid"] is True
        assert result["errors"] == []
        assert result["birth_date"] == "1990-01-08"
        assert result["gender"] == "Male"
        assert result["citizenship_status"] == "Citizen"

    def test_invalid_id_is_200_with_errors(self, client):
        resp = client.post("/validate", json={"id_number": "9013085012083"})
        assert resp.status_code == 200
        result = resp.json()["result"]
        assert result["is_valid"] is False
        assert result["errors"] == [
            "Invalid date of birth in ID number",
            "ID number has an invalid checksum",
        ]
        assert result["gender"] is None

    def test_missing_field_is_422(self, client):
        assert client.post("/validate", json={}).status_code == 422


def test_format(client):
    assert client.post("/format", json={"id_number": "900108"}).json() == {"formatted": "900108"}


def test_verify_uses_camel_case(client):
    body = client.post("/verify", json={"id_number": "9001085012085"}).json()
    assert body["isValid"] is True
    assert body["status"] == "success"
    assert body["idDetails"]["citizenshipStatus"] == "Citizen"


def test_person_details(client):
    body = client.get("/person-details/9001085012085").json()
    assert body["idDetails"]["name"] == "John"
    assert body["idDetails"]["isDeceased"] is False


def test_admin_telemetry_reflects_calls(client):
    client.post("/validate", json={"id_number": "9001085012085"})
    client.post("/verify", json={"id_number": "9001085012085"})
    report = client.get("/admin/telemetry").json()
    features = {f["feature"]: f["usage_count"] for f in report["feature_usage_summary"]}
    assert features == {"localValidation": 1, "apiValidation": 1}
    operations = {p["operation"] for p in report["performance_summary"]}
    assert operations == {"idValidation", "apiValidation"}
    assert report["errors_summary"]["count"] == 0


def test_validate_survives_telemetry_outage():
    service = IdValidationService(
        home_affairs=MockHomeAffairsClient(),
        telemetry=TelemetryRecorder(FailingTelemetryStore()),
    )
    with TestClient(create_app(settings=AppSettings(), service=service)) as test_client:
        resp = test_client.post("/validate", json={"id_number": "9001085012085"})
    assert resp.status_code == 200
    assert resp.json()["result"]["is_valid"] is True
