from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from conftest import SAMPLE_DOCKERFILE, FakeLlmGateway
from dockergen.infrastructure.config import Settings
from dockergen.infrastructure.openrouter_adapter import OpenRouterAdapter
from dockergen.interface.app import create_app

ENDPOINT = "/api/generate-dockerfile"
PAYLOAD = {
    "repoInfo": {
        "name": "octocat/Hello-World",
        "language": "Ruby",
        "description": "My first repository",
    }
}


@pytest.fixture
def gateway() -> FakeLlmGateway:
    return FakeLlmGateway()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI, gateway: FakeLlmGateway) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        app.state.llm_gateway = gateway
        yield test_client


def test_generates_dockerfile(client: TestClient, gateway: FakeLlmGateway) -> None:
    resp = client.post(ENDPOINT, json=PAYLOAD)

    assert resp.status_code == 200
    assert resp.json() == {"dockerfile": SAMPLE_DOCKERFILE}
    assert len(gateway.calls) == 1
    assert "octocat/Hello-World" in gateway.calls[0][1]


def test_null_language_and_description_are_accepted(
    client: TestClient, gateway: FakeLlmGateway
) -> None:
    resp = client.post(
        ENDPOINT,
        json={"repoInfo": {"name": "octocat/Hello-World", "language": None, "description": None}},
    )

    assert resp.status_code == 200
    assert "- Language: Unknown" in gateway.calls[0][1]


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
def test_wrong_method_is_rejected(
    client: TestClient, gateway: FakeLlmGateway, method: str
) -> None:
    resp = client.request(method, ENDPOINT, json=PAYLOAD)

    assert resp.status_code == 405
    assert resp.json() == {"error": "Method not allowed"}
    assert gateway.calls == []


@pytest.mark.parametrize(
    "body",
    [{}, {"repoInfo": None}, {"somethingElse": 1}],
)
def test_missing_repo_info_is_a_bad_request(
    client: TestClient, gateway: FakeLlmGateway, body: dict
) -> None:
    resp = client.post(ENDPOINT, json=body)

    assert resp.status_code == 400
    assert resp.json() == {"error": "Repository information is required"}
    assert gateway.calls == []


def test_malformed_json_is_a_bad_request(client: TestClient) -> None:
    resp = client.post(
        ENDPOINT, content=b"{not json", headers={"content-type": "application/json"}
    )

    assert resp.status_code == 400
    assert resp.json()["error"] == "Repository information is required"


def test_blank_repository_name_is_a_bad_request(client: TestClient) -> None:
    resp = client.post(ENDPOINT, json={"repoInfo": {"name": "   "}})

    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Repository information is required; repoInfo → name")


def test_missing_api_key_is_a_server_error(app: FastAPI) -> None:
    with TestClient(app) as client:
        assert app.state.llm_gateway is None
        resp = client.post(ENDPOINT, json=PAYLOAD)

    assert resp.status_code == 500
    assert resp.json() == {"error": "API key not configured"}


def test_upstream_failure_message_is_forwarded(
    client: TestClient, gateway: FakeLlmGateway
) -> None:
    gateway.error = "Rate limit exceeded: free-models-per-day"

    resp = client.post(ENDPOINT, json=PAYLOAD)

    assert resp.status_code == 500
    assert resp.json() == {"error": "Rate limit exceeded: free-models-per-day"}


def test_startup_builds_openrouter_adapter_when_key_is_set(keyed_settings: Settings) -> None:
    app = create_app(keyed_settings)

    with TestClient(app):
        assert isinstance(app.state.llm_gateway, OpenRouterAdapter)

    assert app.state.llm_gateway is None


def test_shutdown_closes_gateway(app: FastAPI, gateway: FakeLlmGateway) -> None:
    with TestClient(app):
        app.state.llm_gateway = gateway

    assert gateway.closed


def test_health_reports_configured_model(client: TestClient) -> None:
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "llm_configured": True}


def test_health_without_api_key(app: FastAPI) -> None:
    with TestClient(app) as test_client:
        resp = test_client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "llm_configured": False}
    assert app.title == "DockerGen - AI Dockerfile Generator"
