"""Claude-backed narrative generator."""

import logging
import os

import anthropic

from truthlens.data import APICallUsage, Prompt, Usage
from truthlens.errors import ExternalApiError

logger = logging.getLogger(__name__)


class ClaudeNarrativeGenerator:
    """Generate analysis narratives using Anthropic's Claude API.

    Transient failures (connection errors, 408/409/429 and 5xx) are retried
    by the SDK with exponential backoff up to ``max_retries`` times.

    Args:
        model: Anthropic model ID to use.
        api_key: API key (defaults to CLAUDE_API_KEY env var).
        max_tokens: Output token ceiling per narrative.
        max_retries: SDK retry budget for transient failures.
    """

    def __init__(
        self,
        *,
        model: str = "claude-haiku-4-5-20251001",
        api_key: str | None = None,
        max_tokens: int = 2048,
        max_retries: int = 3,
    ) -> None:
        self._model = model
        self._max_tokens = max_tokens
        resolved_key = api_key or os.environ.get("CLAUDE_API_KEY")
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key, max_retries=max_retries)

    async def generate(self, prompt: Prompt) -> tuple[str, Usage]:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                system=prompt.system,
                messages=[{"role": "user", "content": prompt.user}],
            )
        except anthropic.APIStatusError as e:
            logger.warning("Narrative generation failed with status %d", e.status_code)
            raise ExternalApiError(
                "The analysis service is unavailable.", upstream_status=e.status_code
            ) from e
        except anthropic.APIError as e:
            logger.warning("Narrative generation failed: %s", e)
            raise ExternalApiError("The analysis service is unavailable.") from e

        usage = Usage(
            api_calls=[
                APICallUsage(
                    model=self._model,
                    input_tokens=response.usage.input_tokens,
                    output_tokens=response.usage.output_tokens,
                    cache_creation_input_tokens=getattr(
                        response.usage, "cache_creation_input_tokens", 0
                    )
                    or 0,
                    cache_read_input_tokens=getattr(response.usage, "cache_read_input_tokens", 0)
                    or 0,
                ),
            ],
        )

        narrative = ""
        for block in response.content:
            if hasattr(block, "text"):
                narrative += block.text

        return (narrative, usage)
