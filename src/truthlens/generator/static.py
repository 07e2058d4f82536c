"""Generator that returns a fixed narrative."""

from truthlens.data import Prompt, Usage


class StaticNarrativeGenerator:
    """Narrative generator that always returns the same text.

    No API calls are made. Useful for offline runs, demos and tests where
    only the local heuristics and the extraction grammar should be
    exercised.

    Args:
        narrative: Text to return for every prompt.
    """

    def __init__(self, narrative: str = "") -> None:
        self._narrative = narrative

    async def generate(self, prompt: Prompt) -> tuple[str, Usage]:
        return (self._narrative, Usage())
