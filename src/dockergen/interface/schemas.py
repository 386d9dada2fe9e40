"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dockergen.domain.entities import UNKNOWN_LANGUAGE, RepoMetadata


class RepoInfo(BaseModel):
    """Repository metadata as sent by the client."""

    name: str = Field(min_length=1)
    language: str | None = UNKNOWN_LANGUAGE
    description: str | None = ""

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "name must not be blank."
            raise ValueError(msg)
        return stripped

    def to_domain(self) -> RepoMetadata:
        return RepoMetadata(
            name=self.name,
            language=self.language or UNKNOWN_LANGUAGE,
            description=self.description or "",
        )


class GenerateDockerfileRequest(BaseModel):
    """Request body for ``POST /api/generate-dockerfile``."""

    model_config = ConfigDict(populate_by_name=True)

    repo_info: RepoInfo = Field(alias="repoInfo")


class GenerateDockerfileResponse(BaseModel):
    """Successful response from ``POST /api/generate-dockerfile``."""

    dockerfile: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    error: str
