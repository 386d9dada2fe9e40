"""Global exception handlers: translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
``{"error": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dockergen.domain.exceptions import (
    ConfigurationError,
    DockerGenError,
    LlmError,
)

logger = logging.getLogger(__name__)

REPO_INFO_REQUIRED = "Repository information is required"

_EXCEPTION_STATUS: list[tuple[type[DockerGenError], int]] = [
    (ConfigurationError, 500),
    (LlmError, 500),
]

_HTTP_MESSAGES: dict[int, str] = {
    404: "Not found",
    405: "Method not allowed",
}


def _error_json(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=headers,
    )


def _validation_message(exc: RequestValidationError) -> str:
    details = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        # Body itself, or repoInfo itself, absent or unusable.
        if len(loc) <= 1:
            return REPO_INFO_REQUIRED
        details.append(f"{' → '.join(loc)}: {err.get('msg', 'validation error')}")
    return "; ".join([REPO_INFO_REQUIRED, *details])


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int,
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> JSONResponse:
                if status_code >= 500:
                    logger.error("%s: %s", type(exc).__name__, exc)
                else:
                    logger.warning("%s: %s", type(exc).__name__, exc)
                return _error_json(status_code, str(exc))

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _validation_message(exc)
        logger.warning("Rejected request to %s: %s", request.url.path, message)
        return _error_json(400, message)

    # ── Routing errors (405 wrong method, 404 unknown path) ─────────────

    @app.exception_handler(StarletteHTTPException)
    async def http_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = _HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
        return _error_json(exc.status_code, message, headers=getattr(exc, "headers", None))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
