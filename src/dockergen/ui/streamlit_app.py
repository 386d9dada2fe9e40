"""DockerGen web UI.

Run with ``streamlit run src/dockergen/ui/streamlit_app.py``.  The page talks
to the FastAPI backend at ``API_BASE_URL``; it never sees the OpenRouter key.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import MutableMapping
from typing import Any

import httpx
import streamlit as st

from dockergen.client.api_client import DockerfileApiClient
from dockergen.client.generation_chain import (
    DOCKERFILE_NAME,
    ChainOutcome,
    GenerationChain,
    Notification,
    Variant,
)
from dockergen.infrastructure.config import Settings, get_settings
from dockergen.infrastructure.github_rest_adapter import GitHubRestAdapter

logger = logging.getLogger(__name__)

FEATURES = [
    (
        "AI-Powered Analysis",
        "Detects your project's technology stack for optimal containerization.",
    ),
    (
        "Production Ready",
        "Security best practices, multi-stage builds and health checks.",
    ),
    (
        "Instant Download",
        "Download your Dockerfile and start containerizing right away.",
    ),
]


async def _run_chain(repo_url: str, settings: Settings) -> tuple[GenerationChain, ChainOutcome]:
    token = settings.github_token.get_secret_value() if settings.github_token else None
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds)) as github_http:
        # Generation can take much longer than a metadata read.
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(settings.llm_timeout_seconds + 10)
        ) as api_http:
            chain = GenerationChain(
                repo_fetcher=GitHubRestAdapter(client=github_http, token=token),
                generator=DockerfileApiClient(client=api_http, base_url=settings.api_base_url),
            )
            outcome = await chain.generate(repo_url)
    return chain, outcome


def _notify(notification: Notification) -> None:
    icon = "🚫" if notification.variant is Variant.DESTRUCTIVE else "✅"
    st.toast(f"**{notification.title}**\n\n{notification.description}", icon=icon)


def init_state(state: MutableMapping[str, Any]) -> None:
    state.setdefault("busy", False)
    state.setdefault("pending_url", None)
    state.setdefault("chain", None)
    state.setdefault("repo_info", None)
    state.setdefault("notification", None)


def request_generation(state: MutableMapping[str, Any], repo_url: str) -> bool:
    """Mark the form busy and queue *repo_url*; False if a run is outstanding."""
    if state["busy"]:
        return False
    state["busy"] = True
    state["pending_url"] = repo_url
    return True


def finish_generation(
    state: MutableMapping[str, Any], chain: GenerationChain | None, outcome: ChainOutcome | None
) -> None:
    """Store the results of a run and clear the busy flag."""
    state["busy"] = False
    state["pending_url"] = None
    if outcome is None:
        return
    if outcome.repo_info is not None:
        state["repo_info"] = outcome.repo_info
    if outcome.ok:
        state["chain"] = chain
    state["notification"] = outcome.notification


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    st.set_page_config(page_title="DockerGen", page_icon="🐳", layout="centered")
    state = st.session_state
    init_state(state)

    st.title("DockerGen")
    st.caption(
        "Generate production-ready Dockerfiles for any public GitHub repository."
    )

    if state["notification"] is not None:
        _notify(state["notification"])
        state["notification"] = None

    repo_url = st.text_input(
        "GitHub repository URL",
        placeholder="https://github.com/username/repository",
        disabled=state["busy"],
    )
    clicked = st.button(
        "Generating..." if state["busy"] else "Generate",
        type="primary",
        disabled=state["busy"] or not repo_url.strip(),
    )

    # The click only queues the run; the rerun renders the form disabled
    # before the chain starts.
    if clicked and request_generation(state, repo_url):
        st.rerun()

    pending_url = state["pending_url"]
    if pending_url is not None:
        chain = outcome = None
        try:
            with st.spinner("Generating..."):
                chain, outcome = asyncio.run(_run_chain(pending_url, settings))
            logger.info("Generation chain for %s ended in %s", pending_url, outcome.state.value)
        finally:
            finish_generation(state, chain, outcome)
        st.rerun()

    repo_info = state["repo_info"]
    if repo_info is not None:
        with st.container(border=True):
            left, right = st.columns([3, 1])
            left.markdown(f"**{repo_info.name}**")
            right.markdown(f"`{repo_info.language}`")

    held: GenerationChain | None = state["chain"]
    if held is not None and held.dockerfile:
        st.subheader("Generated Dockerfile")
        st.caption("Production-ready Dockerfile optimized for your repository")
        st.code(held.dockerfile, language="dockerfile")
        st.download_button(
            "Download",
            data=held.dockerfile_bytes(),
            file_name=DOCKERFILE_NAME,
            mime="text/plain",
            on_click=_notify,
            args=(GenerationChain.download_notification(),),
        )
    else:
        st.divider()
        for column, (title, blurb) in zip(st.columns(len(FEATURES)), FEATURES):
            column.markdown(f"**{title}**")
            column.caption(blurb)


if __name__ == "__main__":
    main()
