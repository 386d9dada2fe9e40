from __future__ import annotations

import json

import httpx
import pytest

from conftest import HELLO_WORLD, SAMPLE_DOCKERFILE, FakeLlmGateway
from dockergen.client.api_client import DockerfileApiClient
from dockergen.domain.exceptions import GenerationError
from dockergen.infrastructure.config import Settings
from dockergen.interface.app import create_app


def _client(handler) -> DockerfileApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return DockerfileApiClient(client=http, base_url="http://localhost:8000/")


async def test_posts_repo_info_and_returns_text() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"dockerfile": SAMPLE_DOCKERFILE})

    text = await _client(handler).generate(HELLO_WORLD)

    assert text == SAMPLE_DOCKERFILE
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "http://localhost:8000/api/generate-dockerfile"
    assert json.loads(seen[0].content) == {
        "repoInfo": {
            "name": "octocat/Hello-World",
            "language": "Ruby",
            "description": "My first repository",
        }
    }


async def test_server_error_message_is_surfaced() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "API key not configured"})

    with pytest.raises(GenerationError, match="API key not configured"):
        await _client(handler).generate(HELLO_WORLD)


async def test_error_without_message_uses_fallback() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(GenerationError, match="^Failed to generate Dockerfile$"):
        await _client(handler).generate(HELLO_WORLD)


async def test_network_error_is_a_generation_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GenerationError):
        await _client(handler).generate(HELLO_WORLD)


async def test_against_the_real_endpoint(settings: Settings) -> None:
    app = create_app(settings)
    gateway = FakeLlmGateway()
    app.state.llm_gateway = gateway
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")

    async with http:
        text = await DockerfileApiClient(http, "http://testserver").generate(HELLO_WORLD)

    assert text == SAMPLE_DOCKERFILE
    assert "My first repository" in gateway.calls[0][1]
