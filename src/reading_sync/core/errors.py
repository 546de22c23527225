"""Pipeline errors, tagged with the stage that failed."""

from enum import Enum
from typing import Any, Optional


class Stage(str, Enum):
    """Pipeline stage."""

    FETCH = "fetch"
    TRANSFORM = "transform"
    WRITE = "write"
    PUBLISH = "publish"


class PipelineError(Exception):
    """Base error for fatal pipeline failures.

    Every stage raises a subclass of this error; the CLI decides how the
    process terminates.
    """

    stage: Stage

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class FetchError(PipelineError):
    """Network, HTTP status or decoding failure while querying the database."""

    stage = Stage.FETCH


class TransformError(PipelineError):
    """Response is missing the ``results`` array or is otherwise malformed."""

    stage = Stage.TRANSFORM


class WriteError(PipelineError):
    """Output directory or page file could not be written."""

    stage = Stage.WRITE


class PublishError(PipelineError):
    """Clone, commit or push failure."""

    stage = Stage.PUBLISH
