"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_LANGUAGE = "Unknown"


@dataclass(frozen=True, slots=True)
class RepoMetadata:
    """Basic metadata about a GitHub repository."""

    name: str  # full "owner/repo"
    language: str = UNKNOWN_LANGUAGE
    description: str = ""


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Raw Dockerfile text as returned by the model."""

    dockerfile: str
