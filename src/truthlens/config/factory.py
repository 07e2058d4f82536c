"""Factory functions to create components from configuration."""

from pathlib import Path

from truthlens.config.models import (
    ClaudeGeneratorConfig,
    HiveForensicsConfig,
    JsonDirStorageConfig,
    MemoryStorageConfig,
    StaticGeneratorConfig,
    TruthLensConfig,
)
from truthlens.forensics.hive import HiveForensics
from truthlens.generator.base import NarrativeGenerator
from truthlens.generator.claude import ClaudeNarrativeGenerator
from truthlens.generator.static import StaticNarrativeGenerator
from truthlens.pipeline.analysis import AnalysisPipeline
from truthlens.run_logger import RunLogger
from truthlens.store.base import ResultStore
from truthlens.store.json_dir import JsonDirResultStore
from truthlens.store.memory import InMemoryResultStore
from truthlens.store.notify import LoggingNotifier


def create_generator(
    config: ClaudeGeneratorConfig | StaticGeneratorConfig,
) -> NarrativeGenerator:
    """Create a narrative generator from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, ClaudeGeneratorConfig):
        return ClaudeNarrativeGenerator(
            model=config.model,
            max_tokens=config.max_tokens,
            max_retries=config.max_retries,
        )
    if isinstance(config, StaticGeneratorConfig):
        return StaticNarrativeGenerator(config.narrative)
    msg = f"Unknown generator config type: {type(config)}"
    raise ValueError(msg)


def create_forensics(config: HiveForensicsConfig | None) -> HiveForensics | None:
    """Create the media-forensics collaborator, if one is configured."""
    if config is None:
        return None
    if isinstance(config, HiveForensicsConfig):
        return HiveForensics(
            api_url=config.api_url,
            class_name=config.class_name,
            timeout=config.timeout,
            max_retries=config.max_retries,
        )
    msg = f"Unknown forensics config type: {type(config)}"
    raise ValueError(msg)


def create_store(config: MemoryStorageConfig | JsonDirStorageConfig) -> ResultStore:
    """Create a result store from config."""
    if isinstance(config, MemoryStorageConfig):
        return InMemoryResultStore()
    if isinstance(config, JsonDirStorageConfig):
        return JsonDirResultStore(config.directory)
    msg = f"Unknown storage config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: TruthLensConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[AnalysisPipeline, RunLogger | None]:
    """Create a complete pipeline from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = AnalysisPipeline(
        create_generator(config.generator),
        forensics=create_forensics(config.forensics),
        store=create_store(config.storage),
        notifier=LoggingNotifier(),
        limits=config.limits,
        heuristics=config.heuristics,
        run_logger=run_logger,
    )
    return (pipeline, run_logger)
