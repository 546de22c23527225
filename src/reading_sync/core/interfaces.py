"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from reading_sync.core.entities import ReadingList


@dataclass(frozen=True)
class PublishResult:
    """Outcome of a publish step."""

    committed: bool
    pushed: bool
    commit_sha: Optional[str] = None


class DatabaseSource(ABC):
    """Interface for querying the remote content database."""

    @abstractmethod
    async def query_database(self) -> dict[str, Any]:
        """Return the raw query response."""
        pass


class PageWriter(ABC):
    """Interface for materializing reading list pages."""

    @abstractmethod
    def write(self, reading_list: ReadingList) -> list[Path]:
        """Write one page per item and return the written paths."""
        pass


class CredentialProvider(ABC):
    """Interface for authenticating git network operations."""

    @abstractmethod
    def environment(self) -> dict[str, str]:
        """Environment variables to pass to a single git invocation."""
        pass


class RepositoryPublisher(ABC):
    """Interface for publishing the working copy."""

    @abstractmethod
    def prepare(self) -> None:
        """Acquire the local working copy."""
        pass

    @abstractmethod
    def publish(self) -> PublishResult:
        """Stage, commit and push all changes."""
        pass
