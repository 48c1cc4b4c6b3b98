import pytest
import requests
from fastapi.testclient import TestClient

from application.use_cases import SQLGenerationUseCase
from infrastructure.config import SystemConfig
from interface.web import create_app

BODY = {
    "api_key": "key",
    "schema": "CREATE TABLE employees (id INTEGER, name TEXT);",
    "question": "How many employees are there?",
}


@pytest.fixture
def client(gemini_client):
    app = create_app(use_case=SQLGenerationUseCase(gemini_client), config=SystemConfig())
    return TestClient(app)


def test_healthz(client):
    response = client.get("/api/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_index_serves_form(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Text-to-SQL Assistant" in response.text
    assert "/api/generate" in response.text


def test_defaults(client):
    data = client.get("/api/defaults").json()
    assert "CREATE TABLE employees" in data["schema"]
    assert len(data["examples"]) == 4


def test_generate_success(client, gemini_session, http_response, candidate_body):
    gemini_session.post.return_value = http_response(
        200, candidate_body('```json\n{"sql":"SELECT 1","explanation":"test"}\n```')
    )

    response = client.post("/api/generate", json=BODY)

    assert response.status_code == 200
    assert response.json() == {"sql": "SELECT 1", "explanation": "test"}
    _, kwargs = gemini_session.post.call_args
    assert kwargs["params"] == {"key": "key"}
    assert BODY["schema"] in kwargs["json"]["contents"][0]["parts"][0]["text"]


def test_generate_missing_key_is_bad_request(client, gemini_session):
    response = client.post("/api/generate", json={**BODY, "api_key": ""})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter your Gemini API key"
    assert gemini_session.post.call_count == 0


def test_generate_remote_error(client, gemini_session, http_response):
    gemini_session.post.return_value = http_response(
        429, {"error": {"message": "quota exceeded"}}
    )

    response = client.post("/api/generate", json=BODY)

    assert response.status_code == 502
    assert response.json()["detail"] == "quota exceeded"


def test_generate_transport_error(client, gemini_session):
    gemini_session.post.side_effect = requests.exceptions.ConnectionError("down")

    response = client.post("/api/generate", json=BODY)

    assert response.status_code == 504
    assert "Could not reach the Gemini API" in response.json()["detail"]


def test_generate_decode_error(client, gemini_session, http_response, candidate_body):
    gemini_session.post.return_value = http_response(200, candidate_body("SELECT 1"))

    response = client.post("/api/generate", json=BODY)

    assert response.status_code == 502
    assert "SELECT 1" in response.json()["detail"]
