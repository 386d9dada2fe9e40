"""HTTP client for the same-origin ``/api/generate-dockerfile`` endpoint."""

from __future__ import annotations

import logging
from dataclasses import asdict

import httpx

from dockergen.domain.entities import RepoMetadata
from dockergen.domain.exceptions import GenerationError

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-dockerfile"
_FALLBACK_MESSAGE = "Failed to generate Dockerfile"


class DockerfileApiClient:
    """Posts repository metadata to the generation endpoint.

    The OpenRouter key never passes through here; it lives on the server.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self._endpoint = f"{base_url.rstrip('/')}{GENERATE_PATH}"

    async def generate(self, repo_info: RepoMetadata) -> str:
        """Return the raw Dockerfile text generated for *repo_info*."""
        try:
            resp = await self._client.post(
                self._endpoint, json={"repoInfo": asdict(repo_info)}
            )
        except httpx.HTTPError as exc:
            logger.warning("Network error calling %s: %s", self._endpoint, exc)
            raise GenerationError(_FALLBACK_MESSAGE) from exc

        if not resp.is_success:
            message = _error_message(resp)
            logger.warning("Generation endpoint returned HTTP %d: %s", resp.status_code, message)
            raise GenerationError(message)

        try:
            body = resp.json()
        except ValueError as exc:
            raise GenerationError(_FALLBACK_MESSAGE) from exc
        dockerfile = body.get("dockerfile") if isinstance(body, dict) else None
        return dockerfile if isinstance(dockerfile, str) else ""


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return _FALLBACK_MESSAGE
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return _FALLBACK_MESSAGE
