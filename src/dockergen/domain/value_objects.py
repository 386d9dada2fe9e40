"""Value objects and GitHub URL parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

_STRICT_GITHUB_URL_RE = re.compile(
    r"^https://github\.com/[\w-]+/[\w-]+/?$", re.ASCII
)
_REPO_PATH_RE = re.compile(r"github\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+)")
_GIT_SUFFIX_RE = re.compile(r"(?:\.git)+$")


def is_valid_github_url(url: str) -> bool:
    """Return True if *url* looks like ``https://github.com/<owner>/<repo>``."""
    return bool(_STRICT_GITHUB_URL_RE.match(url.strip()))


def parse_repo_reference(url: str) -> RepoReference | None:
    """Extract owner and repo from *url*, or ``None`` when it has neither."""
    match = _REPO_PATH_RE.search(url.strip())
    if not match:
        return None
    repo = _GIT_SUFFIX_RE.sub("", match["repo"])
    if not repo:
        return None
    return RepoReference(owner=match["owner"], repo=repo)


@dataclass(frozen=True, slots=True)
class RepoReference:
    """Owner / repository pair identifying a GitHub repository.

    Built from a URL like ``https://github.com/octocat/Hello-World``.  A
    trailing ``.git`` on the repository segment is dropped, so parsing
    :attr:`url` again always yields the same reference.
    """

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def url(self) -> str:
        return f"https://github.com/{self.full_name}"
