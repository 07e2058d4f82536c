"""JSON response bodies for results and errors.

Every response body is either the result fields (including ``id`` and
``timestamp``) or a single ``error`` sentence. Upstream bodies and stack
traces never reach the caller.
"""

import logging
from typing import Any

from pydantic import TypeAdapter

from truthlens.data import AnalysisResult
from truthlens.errors import InternalError, TruthLensError

logger = logging.getLogger(__name__)

_RESULT_ADAPTER: TypeAdapter[AnalysisResult] = TypeAdapter(AnalysisResult)


def result_response(result: AnalysisResult) -> tuple[int, dict[str, Any]]:
    """Render ``result`` as a 200 response body."""
    return (200, _RESULT_ADAPTER.dump_python(result, mode="json"))


def error_response(error: BaseException) -> tuple[int, dict[str, Any]]:
    """Render any exception as a status code and ``{"error": ...}`` body.

    Exceptions outside the TruthLens taxonomy become a generic
    ``InternalError``.
    """
    if not isinstance(error, TruthLensError):
        logger.error("Unexpected error: %r", error)
        error = InternalError("An unexpected error occurred.")
    return (error.status_code, {"error": error.message})
