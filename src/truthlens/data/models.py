"""Core data models for TruthLens."""

from dataclasses import dataclass, field
from enum import StrEnum


class AnalysisKind(StrEnum):
    """The three analyses the pipeline can run."""

    FACT_CHECK = "fact_check"
    BIAS = "bias"
    MEDIA_AUTHENTICITY = "media_authenticity"


class Surface(StrEnum):
    """Deployment surface a request arrives on.

    ``EXTENSION`` is the anonymous browser-extension flow: nothing is stored
    and nobody is notified. ``APP`` is the signed-in application flow: a user
    is required, results are persisted and a notification is sent.
    """

    EXTENSION = "extension"
    APP = "app"


class PoliticalLeaning(StrEnum):
    """Coarse five-point political leaning."""

    LEFT = "Left"
    CENTER_LEFT = "Center-Left"
    CENTER = "Center"
    CENTER_RIGHT = "Center-Right"
    RIGHT = "Right"


class EmotionalTone(StrEnum):
    """Dominant emotional register of a text."""

    ANGRY = "Angry"
    FEAR_INDUCING = "Fear-inducing"
    HOPEFUL = "Hopeful"
    NEUTRAL = "Neutral"


class VerificationStatus(StrEnum):
    """Fact-check verdict."""

    VERIFIED = "VERIFIED"
    PARTIALLY_VERIFIED = "PARTIALLY_VERIFIED"
    UNVERIFIED = "UNVERIFIED"
    FALSE = "FALSE"


class AuthenticityRating(StrEnum):
    """Media authenticity verdict, most to least trustworthy."""

    AUTHENTIC = "AUTHENTIC"
    LIKELY_AUTHENTIC = "LIKELY_AUTHENTIC"
    QUESTIONABLE = "QUESTIONABLE"
    LIKELY_MANIPULATED = "LIKELY_MANIPULATED"
    MANIPULATED = "MANIPULATED"


@dataclass(frozen=True)
class Submission:
    """A text or URL submitted for analysis."""

    content: str
    kind: AnalysisKind
    source_url: str | None = None


@dataclass(frozen=True)
class MediaSubmission:
    """An uploaded media file submitted for authenticity verification."""

    filename: str
    content_type: str
    data: bytes = b""

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class NormalizedContent:
    """Analyzable text resolved from a submission.

    ``text`` never exceeds the configured character ceiling.
    """

    text: str
    was_fetched_from_url: bool = False
    original_length: int = 0


@dataclass(frozen=True)
class BiasHeuristic:
    """Keyword-based leaning, tone and rhetorical indicators."""

    leaning: PoliticalLeaning = PoliticalLeaning.CENTER
    tone: EmotionalTone = EmotionalTone.NEUTRAL
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class CredibilityHeuristic:
    """Keyword-based credibility baseline in ``[0, 100]``."""

    baseline_score: int = 50


HeuristicResult = BiasHeuristic | CredibilityHeuristic


@dataclass(frozen=True)
class Prompt:
    """System instruction and user prompt for one narrative request."""

    system: str
    user: str


@dataclass(frozen=True)
class ExtractedFields:
    """Typed fields recovered from a narrative.

    Numeric fields are clamped to ``[0, 100]``. List fields hold bullet text
    with markers and surrounding whitespace removed, in document order.
    """

    score: int | None = None
    confidence: int | None = None
    verification_status: VerificationStatus | None = None
    authenticity: AuthenticityRating | None = None
    bias_detected: bool | None = None
    summary: str | None = None
    flags: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    key_findings: tuple[str, ...] = ()
    verification_steps: tuple[str, ...] = ()


@dataclass(frozen=True)
class ForensicsReport:
    """Result of a media-forensics call."""

    deepfake_score: float = 0.0
    authenticity_score: int = 100
    classes: tuple[tuple[str, float], ...] = ()

    @property
    def is_deepfake(self) -> bool:
        return self.deepfake_score > 0.5


@dataclass(frozen=True)
class AnalysisResult:
    """The assembled, immutable verdict for one submission.

    Produced only by ``assemble``. A correction is a new record, never a
    mutation of an existing one.
    """

    id: str
    kind: AnalysisKind
    timestamp: str
    narrative: str
    content: str = ""
    score: int | None = None
    confidence: int | None = None
    baseline_score: int | None = None
    verification_status: VerificationStatus | None = None
    authenticity: AuthenticityRating | None = None
    leaning: PoliticalLeaning | None = None
    tone: EmotionalTone | None = None
    bias_detected: bool | None = None
    summary: str | None = None
    deepfake_likelihood: float | None = None
    indicators: tuple[str, ...] = ()
    flags: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    key_findings: tuple[str, ...] = ()
    verification_steps: tuple[str, ...] = ()


@dataclass(frozen=True)
class APICallUsage:
    """Usage from a single generator call."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0


@dataclass
class Usage:
    """Accumulated external usage across one pipeline run."""

    api_calls: list[APICallUsage] = field(default_factory=list)
    fetch_requests: int = 0
    forensics_requests: int = 0

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(
            api_calls=self.api_calls + other.api_calls,
            fetch_requests=self.fetch_requests + other.fetch_requests,
            forensics_requests=self.forensics_requests + other.forensics_requests,
        )

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        self.fetch_requests += other.fetch_requests
        self.forensics_requests += other.forensics_requests
        return self
