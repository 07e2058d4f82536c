"""Deepfake detection using the Hive synchronous task API."""

import logging
import math
import os
from typing import Any

import httpx

from truthlens.bounds import clamp
from truthlens.data import ForensicsReport, MediaSubmission, Usage
from truthlens.errors import ExternalApiError

HIVE_API_URL = "https://api.thehive.ai/api/v2/task/sync"

logger = logging.getLogger(__name__)


def authenticity_from_deepfake(deepfake_score: float) -> int:
    """Convert a ``[0, 1]`` deepfake probability into a 0-100 authenticity score."""
    return clamp(100 - math.floor(deepfake_score * 100))


def parse_report(data: dict[str, Any], class_name: str = "yes_deepfake") -> ForensicsReport:
    """Read the named class score out of a Hive response body.

    A missing output, class list or class yields a deepfake score of 0.
    """
    outputs = data.get("output") or []
    first = outputs[0] if outputs and isinstance(outputs[0], dict) else {}
    classes: list[tuple[str, float]] = []
    for item in first.get("classes") or []:
        if isinstance(item, dict) and "class" in item:
            try:
                classes.append((str(item["class"]), float(item.get("score", 0.0))))
            except (TypeError, ValueError):
                continue

    deepfake = next((score for name, score in classes if name == class_name), 0.0)
    deepfake = max(0.0, min(1.0, deepfake))
    return ForensicsReport(
        deepfake_score=deepfake,
        authenticity_score=authenticity_from_deepfake(deepfake),
        classes=tuple(classes),
    )


class HiveForensics:
    """Score media for deepfake manipulation with Hive.

    Args:
        api_key: Hive API key (defaults to HIVE_API_KEY env var).
        api_url: Synchronous task endpoint.
        class_name: Class whose score is read as the deepfake probability.
        timeout: Request timeout in seconds.
        max_retries: Connection retry budget.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        api_url: str = HIVE_API_URL,
        class_name: str = "yes_deepfake",
        timeout: float = 60.0,
        max_retries: int = 2,
    ) -> None:
        self._api_key = api_key or os.environ.get("HIVE_API_KEY")
        if not self._api_key:
            raise ValueError("Hive API key required. Pass api_key or set HIVE_API_KEY env var.")
        self._api_url = api_url
        self._class_name = class_name
        self._timeout = timeout
        self._max_retries = max_retries

    async def analyze(self, media: MediaSubmission) -> tuple[ForensicsReport, Usage]:
        transport = httpx.AsyncHTTPTransport(retries=self._max_retries)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=transport) as client:
                response = await client.post(
                    self._api_url,
                    headers={"Authorization": f"Token {self._api_key}"},
                    files={"media": (media.filename, media.data, media.content_type)},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Hive request failed with status %d", status)
            raise ExternalApiError(
                "Failed to analyze media.", upstream_status=status, status_code=502
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Hive request failed: %s", e)
            raise ExternalApiError("Failed to analyze media.", status_code=502) from e

        if not isinstance(data, dict):
            data = {}
        return (parse_report(data, self._class_name), Usage(forensics_requests=1))
