"""FastAPI dependency injection wiring."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from dockergen.infrastructure.config import Settings
from dockergen.infrastructure.openrouter_adapter import OpenRouterAdapter
from dockergen.services.generate_dockerfile import GenerateDockerfileUseCase

logger = logging.getLogger(__name__)


async def startup(app: FastAPI) -> None:
    """Initialise shared resources; called from the lifespan context manager."""
    settings: Settings = app.state.settings
    if settings.openrouter_api_key is None or not settings.openrouter_api_key.get_secret_value():
        logger.warning("OPENROUTER_API_KEY is not set; generation requests will fail")
        app.state.llm_gateway = None
        return

    app.state.llm_gateway = OpenRouterAdapter(
        api_key=settings.openrouter_api_key.get_secret_value(),
        model=settings.openrouter_model,
        base_url=settings.openrouter_base_url,
        site_url=settings.site_url,
        app_title=settings.app_title,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout=settings.llm_timeout_seconds,
    )


async def shutdown(app: FastAPI) -> None:
    """Release shared resources."""
    gateway = getattr(app.state, "llm_gateway", None)
    if gateway is not None:
        await gateway.close()
    app.state.llm_gateway = None


def get_use_case(request: Request) -> GenerateDockerfileUseCase:
    """Build the use case around the gateway created at startup."""
    return GenerateDockerfileUseCase(
        llm_gateway=getattr(request.app.state, "llm_gateway", None),
    )
