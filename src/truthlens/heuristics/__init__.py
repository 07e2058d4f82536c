"""Local, network-free heuristic scoring."""

from truthlens.heuristics.scorer import (
    DEFAULT_HEURISTICS,
    classify_leaning,
    classify_tone,
    count_keyword_matches,
    credibility_baseline,
    detect_indicators,
    score_bias,
    score_content,
    score_credibility,
)

__all__ = [
    "DEFAULT_HEURISTICS",
    "classify_leaning",
    "classify_tone",
    "count_keyword_matches",
    "credibility_baseline",
    "detect_indicators",
    "score_bias",
    "score_content",
    "score_credibility",
]
