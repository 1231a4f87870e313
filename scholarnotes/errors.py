"""
Error taxonomy for the notes pipeline.

    NotesPipelineError
    ├── UploadRejectedError   file refused before the pipeline starts
    ├── ExtractionError       document could not be parsed (no API usage)
    └── SummarizationError
        ├── RateLimitError    upstream quota / backpressure
        └── ServiceError      any other upstream failure

Errors are never masked inside the pipeline; the first one aborts the run.
"""

from scholarnotes.config import GENERIC_ERROR_MESSAGE, RATE_LIMIT_MESSAGE


class NotesPipelineError(Exception):
    """Base class for every failure the pipeline surfaces to its caller."""


class UploadRejectedError(NotesPipelineError):
    """The selected file is missing, not a PDF, or too large."""


class ExtractionError(NotesPipelineError):
    """The document could not be opened or its pages could not be read."""


class SummarizationError(NotesPipelineError):
    """A call to the summarization service failed."""


class RateLimitError(SummarizationError):
    """The service rejected the request because a token or rate quota was exceeded."""

    def __init__(self, message: str, retry_after: float | None = None):
        super().__init__(message)
        # Informational only; nothing in the pipeline retries
        self.retry_after = retry_after


class ServiceError(SummarizationError):
    """Timeout, connection, auth, non-success status or malformed response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def user_facing_message(exc: Exception) -> str:
    """
    Message shown to the user for a failed run.

    Rate limits get their own "try again later" wording; upload rejections
    explain themselves; everything else gets the generic retry message.
    """
    if isinstance(exc, RateLimitError):
        return RATE_LIMIT_MESSAGE
    if isinstance(exc, UploadRejectedError):
        return str(exc)
    return GENERIC_ERROR_MESSAGE
