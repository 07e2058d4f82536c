"""Protocol for narrative generation."""

from typing import Protocol

from truthlens.data import Prompt, Usage


class NarrativeGenerator(Protocol):
    """Interface for services that turn a prompt into free-text analysis."""

    async def generate(self, prompt: Prompt) -> tuple[str, Usage]:
        """Generate a narrative for ``prompt``.

        Args:
            prompt: System instruction and user prompt.

        Returns:
            Tuple of (narrative text, usage).

        Raises:
            ExternalApiError: If the service call fails.
        """
        ...
