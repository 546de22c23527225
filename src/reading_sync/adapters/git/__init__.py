"""Git adapters."""

from reading_sync.adapters.git.credentials import TokenRewriteCredentials
from reading_sync.adapters.git.publisher import GitPublisher

__all__ = ["GitPublisher", "TokenRewriteCredentials"]
