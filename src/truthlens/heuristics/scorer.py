"""Local keyword heuristics for leaning, tone, indicators and credibility.

Every function here is a pure function of its text argument and the
``HeuristicsConfig`` it is given. Matching is case-insensitive substring
matching, so the scorer is coarse but fully explainable.
"""

from truthlens.bounds import cap, clamp
from truthlens.config.models import HeuristicsConfig
from truthlens.data import (
    AnalysisKind,
    BiasHeuristic,
    CredibilityHeuristic,
    EmotionalTone,
    HeuristicResult,
    PoliticalLeaning,
)

DEFAULT_HEURISTICS = HeuristicsConfig()


def _contains_any(lowered: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword.lower() in lowered for keyword in keywords)


def count_keyword_matches(text: str, keywords: tuple[str, ...]) -> int:
    """Count how many distinct ``keywords`` occur in ``text``."""
    lowered = text.lower()
    return sum(1 for keyword in keywords if keyword.lower() in lowered)


def classify_leaning(text: str, config: HeuristicsConfig = DEFAULT_HEURISTICS) -> PoliticalLeaning:
    """Classify political leaning from left/right keyword counts.

    A side must lead by more than ``bias_margin`` matches to move off
    Center, and needs more than ``strong_lean_threshold`` matches to be
    classified at full strength.
    """
    left = count_keyword_matches(text, config.left_keywords)
    right = count_keyword_matches(text, config.right_keywords)

    if left > right + config.bias_margin:
        if left > config.strong_lean_threshold:
            return PoliticalLeaning.LEFT
        return PoliticalLeaning.CENTER_LEFT
    if right > left + config.bias_margin:
        if right > config.strong_lean_threshold:
            return PoliticalLeaning.RIGHT
        return PoliticalLeaning.CENTER_RIGHT
    return PoliticalLeaning.CENTER


def classify_tone(text: str, config: HeuristicsConfig = DEFAULT_HEURISTICS) -> EmotionalTone:
    """Return the tone of the first matching tone group, else Neutral."""
    lowered = text.lower()
    for group in config.tone_groups:
        if _contains_any(lowered, group.keywords):
            return group.tone
    return EmotionalTone.NEUTRAL


def detect_indicators(
    text: str, config: HeuristicsConfig = DEFAULT_HEURISTICS
) -> tuple[str, ...]:
    """List rhetorical indicators present in ``text``, in rule order."""
    lowered = text.lower()
    found = [rule.label for rule in config.indicator_rules if _contains_any(lowered, rule.tokens)]
    return cap(found, config.max_indicators)


def score_bias(text: str, config: HeuristicsConfig = DEFAULT_HEURISTICS) -> BiasHeuristic:
    """Run leaning, tone and indicator detection over ``text``."""
    return BiasHeuristic(
        leaning=classify_leaning(text, config),
        tone=classify_tone(text, config),
        indicators=detect_indicators(text, config),
    )


def credibility_baseline(text: str, config: HeuristicsConfig = DEFAULT_HEURISTICS) -> int:
    """Compute the keyword credibility baseline, clamped to ``[0, 100]``.

    Each adjustment applies at most once, independently of the others.
    """
    lowered = text.lower()
    score = config.baseline_start
    for adjustment in config.credibility_adjustments:
        if _contains_any(lowered, adjustment.keywords):
            score += adjustment.points
    return clamp(score)


def score_credibility(
    text: str, config: HeuristicsConfig = DEFAULT_HEURISTICS
) -> CredibilityHeuristic:
    return CredibilityHeuristic(baseline_score=credibility_baseline(text, config))


def score_content(
    kind: AnalysisKind, text: str, config: HeuristicsConfig = DEFAULT_HEURISTICS
) -> HeuristicResult | None:
    """Run the heuristic that belongs to ``kind``.

    Media submissions have no text to score, so they yield ``None``.
    """
    if kind is AnalysisKind.BIAS:
        return score_bias(text, config)
    if kind is AnalysisKind.FACT_CHECK:
        return score_credibility(text, config)
    return None
