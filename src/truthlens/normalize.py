"""Resolve submissions into analyzable text and validate media uploads."""

import logging
import re

import httpx

from truthlens.config.models import LimitsConfig, MediaPolicy
from truthlens.data import MediaSubmission, NormalizedContent, Submission
from truthlens.errors import ExternalApiError, ValidationError

logger = logging.getLogger(__name__)

_TAG = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")


def looks_like_url(content: str) -> bool:
    """Whether ``content`` should be fetched rather than analyzed as-is."""
    return content.strip().lower().startswith("http")


def strip_markup(html: str, max_chars: int = 5000) -> str:
    """Replace tags with spaces, collapse whitespace, trim and truncate."""
    text = _TAG.sub(" ", html)
    text = _WHITESPACE.sub(" ", text).strip()
    return text[:max_chars]


def validate_text(content: str | None, max_chars: int = 5000) -> str:
    """Check that submitted text is present and within the ceiling.

    Raises:
        ValidationError: If content is empty, whitespace-only or too long.
    """
    if not content or not content.strip():
        raise ValidationError("Content is required and cannot be empty.")
    if len(content) > max_chars:
        raise ValidationError(f"Content too long (max {max_chars} characters).")
    return content


def validate_media(media: MediaSubmission | None, policy: MediaPolicy) -> MediaSubmission:
    """Check an upload against a surface's size ceiling and MIME allow-list.

    Raises:
        ValidationError: If no file was given, or it is too large or of an
            unsupported type.
    """
    if media is None or not media.filename:
        raise ValidationError("No file provided.")
    if media.size > policy.max_bytes:
        max_mb = policy.max_bytes // (1024 * 1024)
        raise ValidationError(f"File too large (max {max_mb}MB).")
    if media.content_type not in policy.allowed_types:
        raise ValidationError("Unsupported file type.")
    return media


class Normalizer:
    """Turn a submission into bounded plain text.

    URL submissions are fetched and their markup stripped; anything else is
    analyzed verbatim.

    Args:
        limits: Character ceiling and fetch settings.
    """

    def __init__(self, limits: LimitsConfig | None = None) -> None:
        self._limits = limits or LimitsConfig()

    async def normalize(
        self, submission: Submission, *, request_id: str | None = None
    ) -> NormalizedContent:
        """Resolve ``submission`` into ``NormalizedContent``.

        Raises:
            ValidationError: If the content is empty or too long.
            ExternalApiError: If a URL could not be fetched.
        """
        content = validate_text(submission.content, self._limits.max_content_chars)

        if not looks_like_url(content):
            return NormalizedContent(
                text=content[: self._limits.max_content_chars],
                was_fetched_from_url=False,
                original_length=len(content),
            )

        html = await self._fetch(content.strip(), request_id=request_id)
        return NormalizedContent(
            text=strip_markup(html, self._limits.max_content_chars),
            was_fetched_from_url=True,
            original_length=len(html),
        )

    async def _fetch(self, url: str, *, request_id: str | None) -> str:
        transport = httpx.AsyncHTTPTransport(retries=self._limits.fetch_retries)
        try:
            async with httpx.AsyncClient(
                timeout=self._limits.fetch_timeout,
                transport=transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("URL fetch failed [%s] %s: status %d", request_id, url, status)
            raise ExternalApiError(
                "Failed to fetch content from URL.",
                upstream_status=status,
                status_code=400,
                request_id=request_id,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("URL fetch failed [%s] %s: %s", request_id, url, e)
            raise ExternalApiError(
                "Failed to fetch content from URL.",
                status_code=400,
                request_id=request_id,
            ) from e
