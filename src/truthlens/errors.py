"""Error taxonomy for TruthLens.

Every error raised deliberately by the pipeline derives from ``TruthLensError``
and carries the HTTP-style status the caller should see. The message of a
``TruthLensError`` is always safe to show to a user; upstream bodies and
internal details are kept in attributes for logging only.
"""

from enum import StrEnum


class ErrorType(StrEnum):
    """Machine-readable error categories."""

    VALIDATION = "validation_error"
    AUTHENTICATION = "authentication_error"
    EXTERNAL_API = "external_api_error"
    STORAGE = "storage_error"
    INTERNAL = "internal_error"


class TruthLensError(Exception):
    """Base class for all TruthLens errors."""

    error_type: ErrorType = ErrorType.INTERNAL
    status_code: int = 500

    def __init__(self, message: str, *, request_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.request_id = request_id


class ValidationError(TruthLensError):
    """Malformed, oversized or missing input."""

    error_type = ErrorType.VALIDATION
    status_code = 400


class AuthenticationError(TruthLensError):
    """Missing or invalid session on an authenticated surface."""

    error_type = ErrorType.AUTHENTICATION
    status_code = 401


class ExternalApiError(TruthLensError):
    """A URL fetch, narrative generator or forensics call failed.

    Args:
        message: User-safe message.
        upstream_status: Status returned by the upstream service, if any.
            Kept for logging only.
        status_code: Status surfaced to the caller.
    """

    error_type = ErrorType.EXTERNAL_API

    def __init__(
        self,
        message: str,
        *,
        upstream_status: int | None = None,
        status_code: int = 502,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message, request_id=request_id)
        self.upstream_status = upstream_status
        self.status_code = status_code


class StorageError(TruthLensError):
    """The persistence collaborator failed to write a result."""

    error_type = ErrorType.STORAGE
    status_code = 500


class InternalError(TruthLensError):
    """Unexpected failure."""

    error_type = ErrorType.INTERNAL
    status_code = 500
