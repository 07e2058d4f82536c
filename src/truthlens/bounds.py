"""Range helpers shared by the scorer, extractor and assembler."""

SCORE_MIN = 0
SCORE_MAX = 100
MAX_LIST_ITEMS = 5


def clamp(value: int, low: int = SCORE_MIN, high: int = SCORE_MAX) -> int:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def cap(items: tuple[str, ...] | list[str], limit: int = MAX_LIST_ITEMS) -> tuple[str, ...]:
    """Keep the first ``limit`` items, in order."""
    return tuple(items[:limit])
