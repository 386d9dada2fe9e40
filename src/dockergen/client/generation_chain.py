"""Client-side generation chain: validate → fetch metadata → generate.

Each stage has its own user-facing failure message.  A busy flag rejects a
second run while one is outstanding; there is no queue and no cancellation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from dockergen.domain.entities import RepoMetadata
from dockergen.domain.exceptions import (
    GenerationError,
    GenerationInProgressError,
    NothingToDownloadError,
    RepositoryNotFoundError,
)
from dockergen.domain.ports.repo_fetcher import RepoFetcher
from dockergen.domain.value_objects import is_valid_github_url, parse_repo_reference

logger = logging.getLogger(__name__)

DOCKERFILE_NAME = "Dockerfile"


class ChainState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING_METADATA = "fetching_metadata"
    GENERATING = "generating"
    SUCCESS = "success"
    ERROR = "error"


class Variant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class Notification:
    """A transient message for the user (rendered as a toast)."""

    title: str
    description: str
    variant: Variant = Variant.DEFAULT


@dataclass(frozen=True, slots=True)
class ChainOutcome:
    """How a single run of the chain ended."""

    state: ChainState  # SUCCESS or ERROR
    notification: Notification
    repo_info: RepoMetadata | None = None
    dockerfile: str = ""

    @property
    def ok(self) -> bool:
        return self.state is ChainState.SUCCESS


class DockerfileGenerator(Protocol):
    async def generate(self, repo_info: RepoMetadata) -> str: ...


INVALID_URL = Notification(
    "Invalid GitHub URL",
    "Please enter a valid GitHub repository URL",
    Variant.DESTRUCTIVE,
)
DOWNLOAD_STARTED = Notification(
    "Download Started",
    "Dockerfile has been downloaded successfully",
)


def _failure(description: str) -> Notification:
    return Notification("Generation Failed", description, Variant.DESTRUCTIVE)


class GenerationChain:
    """Holds the form's state and runs the generation chain.

    Parameters
    ----------
    repo_fetcher:
        Reads repository metadata (normally :class:`GitHubRestAdapter`).
    generator:
        Calls the generation endpoint (normally :class:`DockerfileApiClient`).
    """

    def __init__(self, repo_fetcher: RepoFetcher, generator: DockerfileGenerator) -> None:
        self._fetcher = repo_fetcher
        self._generator = generator
        self.state = ChainState.IDLE
        self.repo_info: RepoMetadata | None = None
        self.dockerfile = ""

    @property
    def is_busy(self) -> bool:
        return self.state is not ChainState.IDLE

    async def generate(self, repo_url: str) -> ChainOutcome:
        """Run the chain for *repo_url* and return its outcome."""
        if self.is_busy:
            raise GenerationInProgressError("A Dockerfile is already being generated")

        try:
            outcome = await self._run(repo_url)
        finally:
            self.state = ChainState.IDLE
        return outcome

    async def _run(self, repo_url: str) -> ChainOutcome:
        self.state = ChainState.VALIDATING
        ref = parse_repo_reference(repo_url) if is_valid_github_url(repo_url) else None
        if ref is None:
            logger.info("Rejected URL %r", repo_url)
            return ChainOutcome(ChainState.ERROR, INVALID_URL)

        self.state = ChainState.FETCHING_METADATA
        try:
            repo_info = await self._fetcher.fetch_metadata(ref)
        except RepositoryNotFoundError as exc:
            return ChainOutcome(ChainState.ERROR, _failure(str(exc)))
        self.repo_info = repo_info

        self.state = ChainState.GENERATING
        try:
            text = (await self._generator.generate(repo_info)).strip()
        except GenerationError as exc:
            return ChainOutcome(ChainState.ERROR, _failure(str(exc)), repo_info=repo_info)
        if not text:
            return ChainOutcome(
                ChainState.ERROR,
                _failure("Failed to generate Dockerfile content"),
                repo_info=repo_info,
            )

        self.dockerfile = text
        logger.info("Generated Dockerfile for %s", repo_info.name)
        return ChainOutcome(
            ChainState.SUCCESS,
            Notification(
                "Dockerfile Generated!",
                f"Successfully generated Dockerfile for {repo_info.language} project",
            ),
            repo_info=repo_info,
            dockerfile=text,
        )

    # ── Download ────────────────────────────────────────────────────────

    def dockerfile_bytes(self) -> bytes:
        """The held Dockerfile, exactly as displayed, encoded as UTF-8."""
        if not self.dockerfile:
            raise NothingToDownloadError("Generate a Dockerfile first")
        return self.dockerfile.encode("utf-8")

    def save_dockerfile(self, directory: str | Path) -> Path:
        """Write the held Dockerfile to ``<directory>/Dockerfile``."""
        data = self.dockerfile_bytes()
        path = Path(directory) / DOCKERFILE_NAME
        path.write_bytes(data)
        logger.info("Saved Dockerfile to %s", path)
        return path

    @staticmethod
    def download_notification() -> Notification:
        return DOWNLOAD_STARTED
