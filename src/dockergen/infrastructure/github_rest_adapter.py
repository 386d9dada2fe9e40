"""GitHub REST API adapter implementing the RepoFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import httpx

from dockergen.domain.entities import UNKNOWN_LANGUAGE, RepoMetadata
from dockergen.domain.exceptions import RepositoryNotFoundError
from dockergen.domain.value_objects import RepoReference

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_NOT_FOUND_MESSAGE = "Repository not found or is private"


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(self, client: httpx.AsyncClient, token: str | None = None) -> None:
        self._client = client
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "dockergen/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_metadata(self, ref: RepoReference) -> RepoMetadata:
        """GET /repos/{owner}/{repo} → RepoMetadata."""
        url = f"{_GITHUB_API}/repos/{ref.owner}/{ref.repo}"
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            logger.warning("Network error fetching %s: %s", url, exc)
            raise RepositoryNotFoundError(_NOT_FOUND_MESSAGE) from exc

        if resp.status_code != 200:
            self._log_failure(ref, resp)
            raise RepositoryNotFoundError(_NOT_FOUND_MESSAGE)

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("GitHub API returned a non-JSON body for %s", ref.full_name)
            raise RepositoryNotFoundError(_NOT_FOUND_MESSAGE) from exc
        if not isinstance(data, dict):
            logger.warning("GitHub API returned unexpected JSON for %s", ref.full_name)
            raise RepositoryNotFoundError(_NOT_FOUND_MESSAGE)

        return RepoMetadata(
            name=data.get("full_name") or ref.full_name,
            language=data.get("language") or UNKNOWN_LANGUAGE,
            description=data.get("description") or "",
        )

    @staticmethod
    def _log_failure(ref: RepoReference, resp: httpx.Response) -> None:
        if resp.status_code in (403, 429) and resp.headers.get("x-ratelimit-remaining") == "0":
            reset_raw = resp.headers.get("x-ratelimit-reset", "")
            try:
                reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                    "%Y-%m-%d %H:%M:%S UTC"
                )
            except (ValueError, OSError):
                reset_str = reset_raw or "unknown"
            logger.warning(
                "GitHub API rate limit exceeded while fetching %s (resets at %s)",
                ref.full_name,
                reset_str,
            )
            return
        logger.info("GitHub API returned HTTP %d for %s", resp.status_code, ref.full_name)
