"""
Domain exceptions raised by the pipeline services.

The HTTP layer maps these onto status codes in
``core.middleware.error_handling.setup_error_handlers``.
"""

from typing import Optional


class PipelineError(Exception):
    """Base exception for pipeline engine errors."""

    status_code: int = 500
    error_code: str = "PIPELINE_ERROR"

    def __init__(self, message: str, *, detail: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class RecordNotFound(PipelineError):
    """No store owns the requested id."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, message: str = "Record not found", *, record_id: Optional[str] = None):
        super().__init__(message, detail={"id": record_id} if record_id else None)
        self.record_id = record_id


class ValidationFailure(PipelineError):
    """Malformed input rejected before any write."""

    status_code = 422
    error_code = "VALIDATION_ERROR"


class TransientStoreError(PipelineError):
    """The backing store failed; the caller may retry the whole operation."""

    status_code = 503
    error_code = "STORE_UNAVAILABLE"
