"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request

from dockergen.infrastructure.config import Settings, get_settings
from dockergen.interface.dependencies import shutdown, startup
from dockergen.interface.error_handlers import register_error_handlers
from dockergen.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    await startup(app)
    yield
    await shutdown(app)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the DockerGen API.

    The OpenRouter adapter is created in the lifespan hook, so a missing key
    still yields a running app whose generate endpoint answers 500.
    """
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_title,
        version="1.0.0",
        description=(
            "Generates a production-ready Dockerfile for a GitHub repository "
            "from its name, primary language and description."
        ),
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.llm_gateway = None

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health(request: Request) -> dict[str, str | bool]:
        return {
            "status": "ok",
            "llm_configured": request.app.state.llm_gateway is not None,
        }

    return app
