from __future__ import annotations

import pytest

from dockergen.domain.entities import RepoMetadata
from dockergen.domain.exceptions import LlmError, RepositoryNotFoundError
from dockergen.domain.value_objects import RepoReference
from dockergen.infrastructure.config import Settings

HELLO_WORLD = RepoMetadata(
    name="octocat/Hello-World",
    language="Ruby",
    description="My first repository",
)

SAMPLE_DOCKERFILE = "FROM ruby:3.3-slim AS base\nUSER app\n"


class FakeLlmGateway:
    def __init__(self, reply: str = SAMPLE_DOCKERFILE, error: str | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise LlmError(self.error)
        return self.reply

    async def close(self) -> None:
        self.closed = True


class FakeRepoFetcher:
    def __init__(self, metadata: RepoMetadata | None = HELLO_WORLD) -> None:
        self.metadata = metadata
        self.calls: list[RepoReference] = []

    async def fetch_metadata(self, ref: RepoReference) -> RepoMetadata:
        self.calls.append(ref)
        if self.metadata is None:
            raise RepositoryNotFoundError("Repository not found or is private")
        return self.metadata


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, openrouter_api_key=None, github_token=None)


@pytest.fixture
def keyed_settings() -> Settings:
    return Settings(_env_file=None, openrouter_api_key="sk-or-test", github_token=None)
