"""Core domain layer."""

from reading_sync.core.entities import ReadingList, ReadingListItem
from reading_sync.core.errors import (
    FetchError,
    PipelineError,
    PublishError,
    Stage,
    TransformError,
    WriteError,
)
from reading_sync.core.interfaces import (
    CredentialProvider,
    DatabaseSource,
    PageWriter,
    PublishResult,
    RepositoryPublisher,
)

__all__ = [
    "ReadingList",
    "ReadingListItem",
    "Stage",
    "PipelineError",
    "FetchError",
    "TransformError",
    "WriteError",
    "PublishError",
    "DatabaseSource",
    "PageWriter",
    "CredentialProvider",
    "RepositoryPublisher",
    "PublishResult",
]
