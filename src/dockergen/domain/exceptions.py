"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class DockerGenError(Exception):
    """Base exception for the entire application."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class RepositoryNotFoundError(DockerGenError):
    """The repository does not exist or is private."""


# ── Server configuration ────────────────────────────────────────────────────


class ConfigurationError(DockerGenError):
    """A required server-side setting (e.g. the API key) is missing."""


# ── LLM errors ──────────────────────────────────────────────────────────────


class LlmError(DockerGenError):
    """Any error originating from the LLM provider."""


# ── Client-side errors ──────────────────────────────────────────────────────


class GenerationError(DockerGenError):
    """The generation endpoint failed or returned no usable content."""


class GenerationInProgressError(DockerGenError):
    """A generation chain is already running."""


class NothingToDownloadError(DockerGenError):
    """No Dockerfile has been generated yet."""
