"""Data models for TruthLens."""

from truthlens.data.models import (
    AnalysisKind,
    AnalysisResult,
    APICallUsage,
    AuthenticityRating,
    BiasHeuristic,
    CredibilityHeuristic,
    EmotionalTone,
    ExtractedFields,
    ForensicsReport,
    HeuristicResult,
    MediaSubmission,
    NormalizedContent,
    PoliticalLeaning,
    Prompt,
    Submission,
    Surface,
    Usage,
    VerificationStatus,
)

__all__ = [
    "APICallUsage",
    "AnalysisKind",
    "AnalysisResult",
    "AuthenticityRating",
    "BiasHeuristic",
    "CredibilityHeuristic",
    "EmotionalTone",
    "ExtractedFields",
    "ForensicsReport",
    "HeuristicResult",
    "MediaSubmission",
    "NormalizedContent",
    "PoliticalLeaning",
    "Prompt",
    "Submission",
    "Surface",
    "Usage",
    "VerificationStatus",
]
