"""Configuration module for TruthLens.

Component factories live in ``truthlens.config.factory``.
"""

from truthlens.config.loader import get_default_config_path, load_config
from truthlens.config.models import (
    ClaudeGeneratorConfig,
    CredibilityAdjustment,
    GeneratorConfig,
    HeuristicsConfig,
    HiveForensicsConfig,
    IndicatorRule,
    JsonDirStorageConfig,
    LimitsConfig,
    LoggingConfig,
    MediaPolicy,
    MemoryStorageConfig,
    StaticGeneratorConfig,
    StorageConfig,
    ToneGroup,
    TruthLensConfig,
)

__all__ = [
    "ClaudeGeneratorConfig",
    "CredibilityAdjustment",
    "GeneratorConfig",
    "HeuristicsConfig",
    "HiveForensicsConfig",
    "IndicatorRule",
    "JsonDirStorageConfig",
    "LimitsConfig",
    "LoggingConfig",
    "MediaPolicy",
    "MemoryStorageConfig",
    "StaticGeneratorConfig",
    "StorageConfig",
    "ToneGroup",
    "TruthLensConfig",
    "get_default_config_path",
    "load_config",
]
