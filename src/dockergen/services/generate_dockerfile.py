"""Generate-Dockerfile use case.

Depends only on the :class:`LlmGateway` port.  The gateway is injected at
construction; a server started without an OpenRouter key gets ``None`` and
every request fails with :class:`ConfigurationError`.
"""

from __future__ import annotations

import logging

from dockergen.domain.entities import GenerationResult, RepoMetadata
from dockergen.domain.exceptions import ConfigurationError
from dockergen.domain.ports.llm_gateway import LlmGateway
from dockergen.services.prompts import SYSTEM_PROMPT, build_user_prompt

logger = logging.getLogger(__name__)


class GenerateDockerfileUseCase:
    """One prompt, one completion call, one result."""

    def __init__(self, llm_gateway: LlmGateway | None) -> None:
        self._llm = llm_gateway

    async def execute(self, repo_info: RepoMetadata) -> GenerationResult:
        if self._llm is None:
            logger.error("OPENROUTER_API_KEY is not set; cannot generate")
            raise ConfigurationError("API key not configured")

        logger.info("Generating Dockerfile for %s (%s)", repo_info.name, repo_info.language)
        text = await self._llm.complete(SYSTEM_PROMPT, build_user_prompt(repo_info))
        logger.info("Generated %d characters for %s", len(text), repo_info.name)
        return GenerationResult(dockerfile=text)
