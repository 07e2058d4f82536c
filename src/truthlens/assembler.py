"""Merge heuristic, extracted and forensics signals into one result."""

import uuid
from datetime import UTC, datetime

from truthlens.bounds import cap, clamp
from truthlens.data import (
    AnalysisKind,
    AnalysisResult,
    AuthenticityRating,
    BiasHeuristic,
    CredibilityHeuristic,
    ExtractedFields,
    ForensicsReport,
    HeuristicResult,
    VerificationStatus,
)

CONFIDENCE_FLOOR = 60
CONFIDENCE_CEILING = 95
DEFAULT_BIAS_CONFIDENCE = 75
DEEPFAKE_FLAG = "Potential deepfake detected"


def derive_confidence(score: int) -> int:
    """Confidence implied by a score, kept within ``[60, 95]``."""
    return clamp(score, CONFIDENCE_FLOOR, CONFIDENCE_CEILING)


def assemble(
    heuristic: HeuristicResult | None,
    extracted: ExtractedFields,
    narrative: str,
    kind: AnalysisKind,
    *,
    forensics: ForensicsReport | None = None,
    content: str = "",
) -> AnalysisResult:
    """Build the immutable ``AnalysisResult`` for one submission.

    Extracted scalar and enum fields win over heuristic ones. For the bias
    kind the heuristic leaning and tone are the result, and the narrative
    only contributes extra indicators. List fields are capped at five
    entries, earliest first.

    Args:
        heuristic: Local heuristic result, if the kind has one.
        extracted: Fields recovered from the narrative.
        narrative: Raw narrative text, stored verbatim.
        kind: Analysis kind.
        forensics: Media-forensics report for media submissions.
        content: The analyzed text or file name, stored for reference.

    Returns:
        A new result with a fresh id and UTC timestamp.
    """
    baseline = heuristic.baseline_score if isinstance(heuristic, CredibilityHeuristic) else None
    score = extracted.score if extracted.score is not None else baseline
    if kind is AnalysisKind.MEDIA_AUTHENTICITY and forensics is not None:
        score = forensics.authenticity_score
    if score is not None:
        score = clamp(score)

    confidence = extracted.confidence
    if confidence is None and score is not None:
        confidence = derive_confidence(score)
    if confidence is None and kind is AnalysisKind.BIAS:
        confidence = DEFAULT_BIAS_CONFIDENCE
    if confidence is not None:
        confidence = clamp(confidence)

    flags = list(extracted.flags)
    indicators: tuple[str, ...] = ()
    leaning = None
    tone = None
    if isinstance(heuristic, BiasHeuristic):
        leaning = heuristic.leaning
        tone = heuristic.tone
        indicators = cap([*heuristic.indicators, *extracted.flags])
    if forensics is not None and forensics.is_deepfake:
        flags.insert(0, DEEPFAKE_FLAG)

    verification_status = extracted.verification_status
    if kind is AnalysisKind.FACT_CHECK and verification_status is None:
        verification_status = VerificationStatus.UNVERIFIED
    authenticity = extracted.authenticity
    if kind is AnalysisKind.MEDIA_AUTHENTICITY and authenticity is None:
        authenticity = AuthenticityRating.QUESTIONABLE

    return AnalysisResult(
        id=str(uuid.uuid4()),
        kind=kind,
        timestamp=datetime.now(tz=UTC).isoformat(),
        narrative=narrative,
        content=content,
        score=score,
        confidence=confidence,
        baseline_score=baseline,
        verification_status=verification_status,
        authenticity=authenticity,
        leaning=leaning,
        tone=tone,
        bias_detected=extracted.bias_detected,
        summary=extracted.summary,
        deepfake_likelihood=forensics.deepfake_score * 100 if forensics is not None else None,
        indicators=indicators,
        flags=cap(flags),
        sources=cap(extracted.sources),
        recommendations=cap(extracted.recommendations),
        key_findings=cap(extracted.key_findings),
        verification_steps=cap(extracted.verification_steps),
    )
