"""Prompt templates for Dockerfile generation."""

from __future__ import annotations

from dockergen.domain.entities import RepoMetadata

SYSTEM_PROMPT = (
    "You are an expert DevOps engineer specializing in Docker containerization. "
    "Generate production-ready Dockerfiles with best practices."
)

_USER_PROMPT_TEMPLATE = """\
Generate a production-ready Dockerfile for a {language} project named "{name}".

Project details:
- Language: {language}
- Description: {description}

Requirements:
- Use multi-stage builds when appropriate
- Include security best practices
- Add health checks
- Optimize for production
- Include comments explaining each step
- Use appropriate base images
- Set up proper user permissions (run as a non-root user)
- Include environment variables where needed

Generate ONLY the Dockerfile content, no additional text or explanations."""


def build_user_prompt(repo_info: RepoMetadata) -> str:
    """Render the user message for *repo_info*."""
    return _USER_PROMPT_TEMPLATE.format(
        language=repo_info.language,
        name=repo_info.name,
        description=repo_info.description,
    )
