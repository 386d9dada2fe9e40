"""Port: repository fetcher, defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from dockergen.domain.entities import RepoMetadata
from dockergen.domain.value_objects import RepoReference


class RepoFetcher(Protocol):
    """Abstract contract for reading GitHub repository metadata."""

    async def fetch_metadata(self, ref: RepoReference) -> RepoMetadata:
        """Return name, primary language and description of the repository."""
        ...
