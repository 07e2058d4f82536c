"""Protocol for media forensics."""

from typing import Protocol

from truthlens.data import ForensicsReport, MediaSubmission, Usage


class MediaForensics(Protocol):
    """Interface for services that score uploaded media for manipulation."""

    async def analyze(self, media: MediaSubmission) -> tuple[ForensicsReport, Usage]:
        """Score ``media``.

        Args:
            media: A validated upload.

        Returns:
            Tuple of (forensics report, usage).

        Raises:
            ExternalApiError: If the service call fails.
        """
        ...
