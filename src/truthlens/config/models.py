"""Pydantic configuration models for TruthLens components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from truthlens.data import EmotionalTone, Surface

# ============================================================
# Heuristics
# ============================================================


class ToneGroup(BaseModel):
    """Keywords that signal one emotional tone."""

    tone: EmotionalTone
    keywords: tuple[str, ...]

    model_config = {"frozen": True}


class IndicatorRule(BaseModel):
    """A rhetorical pattern reported when any of its tokens occurs."""

    label: str
    tokens: tuple[str, ...]

    model_config = {"frozen": True}


class CredibilityAdjustment(BaseModel):
    """Points added to the credibility baseline when any keyword occurs."""

    keywords: tuple[str, ...]
    points: int

    model_config = {"frozen": True}


def _default_tone_groups() -> tuple[ToneGroup, ...]:
    return (
        ToneGroup(tone=EmotionalTone.ANGRY, keywords=("angry", "outraged", "furious")),
        ToneGroup(tone=EmotionalTone.FEAR_INDUCING, keywords=("fear", "danger", "threat")),
        ToneGroup(tone=EmotionalTone.HOPEFUL, keywords=("hope", "optimistic", "bright future")),
    )


def _default_indicator_rules() -> tuple[IndicatorRule, ...]:
    return (
        IndicatorRule(label="absolute statements", tokens=("always", "never", "all")),
        IndicatorRule(label="vague attribution", tokens=("they say", "sources claim")),
        IndicatorRule(label="excessive punctuation", tokens=("!!", "???")),
    )


def _default_credibility_adjustments() -> tuple[CredibilityAdjustment, ...]:
    return (
        CredibilityAdjustment(keywords=("verified", "accurate"), points=20),
        CredibilityAdjustment(keywords=("credible", "reliable"), points=15),
        CredibilityAdjustment(keywords=("factual", "confirmed"), points=10),
        CredibilityAdjustment(keywords=("false", "misleading"), points=-30),
        CredibilityAdjustment(keywords=("unverified", "questionable"), points=-20),
        CredibilityAdjustment(keywords=("bias", "propaganda"), points=-15),
    )


class HeuristicsConfig(BaseModel):
    """Keyword sets and thresholds for the local heuristic scorer.

    Tone groups, indicator rules and credibility adjustments are ordered:
    the first matching tone group wins, indicators are reported in rule
    order, and adjustments are applied independently.
    """

    left_keywords: tuple[str, ...] = (
        "progressive",
        "liberal",
        "democrat",
        "social justice",
        "inequality",
        "climate change",
    )
    right_keywords: tuple[str, ...] = (
        "conservative",
        "republican",
        "traditional",
        "free market",
        "law and order",
        "border security",
    )
    bias_margin: int = 1
    strong_lean_threshold: int = 3
    tone_groups: tuple[ToneGroup, ...] = Field(default_factory=_default_tone_groups)
    indicator_rules: tuple[IndicatorRule, ...] = Field(default_factory=_default_indicator_rules)
    max_indicators: int = 5
    baseline_start: int = 50
    credibility_adjustments: tuple[CredibilityAdjustment, ...] = Field(
        default_factory=_default_credibility_adjustments
    )

    model_config = {"frozen": True}


# ============================================================
# Limits
# ============================================================


class MediaPolicy(BaseModel):
    """Upload ceiling and MIME allow-list for one surface."""

    max_bytes: int
    allowed_types: tuple[str, ...]

    model_config = {"frozen": True}


def _extension_media_policy() -> MediaPolicy:
    return MediaPolicy(
        max_bytes=10 * 1024 * 1024,
        allowed_types=(
            "image/jpeg",
            "image/png",
            "image/gif",
            "image/webp",
            "video/mp4",
            "video/webm",
        ),
    )


def _app_media_policy() -> MediaPolicy:
    return MediaPolicy(
        max_bytes=50 * 1024 * 1024,
        allowed_types=("image/jpeg", "image/png", "image/gif", "video/mp4", "video/quicktime"),
    )


class LimitsConfig(BaseModel):
    """Input ceilings and fetch behaviour."""

    max_content_chars: int = 5000
    fact_check_prompt_chars: int = 3000
    bias_prompt_chars: int = 3000
    fetch_timeout: float = 15.0
    fetch_retries: int = 2
    extension_media: MediaPolicy = Field(default_factory=_extension_media_policy)
    app_media: MediaPolicy = Field(default_factory=_app_media_policy)

    model_config = {"frozen": True}

    def media_policy(self, surface: Surface) -> MediaPolicy:
        """Return the media policy that applies on ``surface``."""
        if surface is Surface.APP:
            return self.app_media
        return self.extension_media


# ============================================================
# Generator Configs
# ============================================================


class ClaudeGeneratorConfig(BaseModel):
    """Configuration for ClaudeNarrativeGenerator."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 2048
    max_retries: int = 3

    model_config = {"frozen": True}


class StaticGeneratorConfig(BaseModel):
    """Configuration for StaticNarrativeGenerator."""

    type: Literal["static"] = "static"
    narrative: str = ""

    model_config = {"frozen": True}


GeneratorConfig = Annotated[
    ClaudeGeneratorConfig | StaticGeneratorConfig,
    Field(discriminator="type"),
]


# ============================================================
# Forensics Configs
# ============================================================


class HiveForensicsConfig(BaseModel):
    """Configuration for HiveForensics."""

    type: Literal["hive"] = "hive"
    api_url: str = "https://api.thehive.ai/api/v2/task/sync"
    class_name: str = "yes_deepfake"
    timeout: float = 60.0
    max_retries: int = 2

    model_config = {"frozen": True}


# ============================================================
# Storage Configs
# ============================================================


class MemoryStorageConfig(BaseModel):
    """Keep results in process memory."""

    type: Literal["memory"] = "memory"

    model_config = {"frozen": True}


class JsonDirStorageConfig(BaseModel):
    """Write one JSON file per result into ``directory``."""

    type: Literal["json_dir"] = "json_dir"
    directory: str = "results"

    model_config = {"frozen": True}


StorageConfig = Annotated[
    MemoryStorageConfig | JsonDirStorageConfig,
    Field(discriminator="type"),
]


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-run stage logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class TruthLensConfig(BaseModel):
    """Root configuration for TruthLens."""

    generator: ClaudeGeneratorConfig | StaticGeneratorConfig = Field(
        default_factory=ClaudeGeneratorConfig, discriminator="type"
    )
    forensics: HiveForensicsConfig | None = None
    storage: MemoryStorageConfig | JsonDirStorageConfig = Field(
        default_factory=MemoryStorageConfig, discriminator="type"
    )
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    heuristics: HeuristicsConfig = Field(default_factory=HeuristicsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
