"""API routes: thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dockergen.interface.dependencies import get_use_case
from dockergen.interface.schemas import (
    ErrorResponse,
    GenerateDockerfileRequest,
    GenerateDockerfileResponse,
)
from dockergen.services.generate_dockerfile import GenerateDockerfileUseCase

router = APIRouter(prefix="/api")


@router.post(
    "/generate-dockerfile",
    response_model=GenerateDockerfileResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Repository information missing"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "API key missing or model provider error"},
    },
)
async def generate_dockerfile(
    body: GenerateDockerfileRequest,
    use_case: GenerateDockerfileUseCase = Depends(get_use_case),
) -> GenerateDockerfileResponse:
    """Generate a Dockerfile for the described repository."""
    result = await use_case.execute(body.repo_info.to_domain())
    return GenerateDockerfileResponse(dockerfile=result.dockerfile)
