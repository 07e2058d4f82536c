"""TruthLens: credibility, bias and media-authenticity analysis."""

from truthlens.assembler import assemble, derive_confidence
from truthlens.config import TruthLensConfig, load_config
from truthlens.config.factory import create_from_config
from truthlens.data import (
    AnalysisKind,
    AnalysisResult,
    APICallUsage,
    AuthenticityRating,
    BiasHeuristic,
    CredibilityHeuristic,
    EmotionalTone,
    ExtractedFields,
    ForensicsReport,
    MediaSubmission,
    NormalizedContent,
    PoliticalLeaning,
    Prompt,
    Submission,
    Surface,
    Usage,
    VerificationStatus,
)
from truthlens.errors import (
    AuthenticationError,
    ExternalApiError,
    InternalError,
    StorageError,
    TruthLensError,
    ValidationError,
)
from truthlens.extract import extract
from truthlens.forensics import HiveForensics, MediaForensics
from truthlens.generator import (
    ClaudeNarrativeGenerator,
    NarrativeGenerator,
    StaticNarrativeGenerator,
)
from truthlens.heuristics import credibility_baseline, score_bias, score_content
from truthlens.normalize import Normalizer, strip_markup, validate_media
from truthlens.pipeline import AnalysisPipeline
from truthlens.prompts import build_prompt
from truthlens.responses import error_response, result_response
from truthlens.run_logger import RunLogger
from truthlens.store import (
    InMemoryResultStore,
    JsonDirResultStore,
    LoggingNotifier,
    Notifier,
    ResultStore,
)

__all__ = [
    # Models
    "APICallUsage",
    "AnalysisKind",
    "AnalysisResult",
    "AuthenticityRating",
    "BiasHeuristic",
    "CredibilityHeuristic",
    "EmotionalTone",
    "ExtractedFields",
    "ForensicsReport",
    "MediaSubmission",
    "NormalizedContent",
    "PoliticalLeaning",
    "Prompt",
    "Submission",
    "Surface",
    "Usage",
    "VerificationStatus",
    # Errors
    "AuthenticationError",
    "ExternalApiError",
    "InternalError",
    "StorageError",
    "TruthLensError",
    "ValidationError",
    # Core
    "Normalizer",
    "assemble",
    "build_prompt",
    "credibility_baseline",
    "derive_confidence",
    "extract",
    "score_bias",
    "score_content",
    "strip_markup",
    "validate_media",
    # Protocols
    "MediaForensics",
    "NarrativeGenerator",
    "Notifier",
    "ResultStore",
    # Collaborators
    "ClaudeNarrativeGenerator",
    "HiveForensics",
    "InMemoryResultStore",
    "JsonDirResultStore",
    "LoggingNotifier",
    "StaticNarrativeGenerator",
    # Pipeline
    "AnalysisPipeline",
    "RunLogger",
    # Responses
    "error_response",
    "result_response",
    # Config
    "TruthLensConfig",
    "create_from_config",
    "load_config",
]
