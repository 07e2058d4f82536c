"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from truthlens.config import (
    ClaudeGeneratorConfig,
    HeuristicsConfig,
    HiveForensicsConfig,
    JsonDirStorageConfig,
    LimitsConfig,
    MemoryStorageConfig,
    StaticGeneratorConfig,
    TruthLensConfig,
    get_default_config_path,
    load_config,
)
from truthlens.config.factory import (
    create_forensics,
    create_from_config,
    create_generator,
    create_store,
)
from truthlens.data import Surface
from truthlens.forensics import HiveForensics
from truthlens.generator import ClaudeNarrativeGenerator, StaticNarrativeGenerator
from truthlens.pipeline import AnalysisPipeline
from truthlens.run_logger import RunLogger
from truthlens.store import InMemoryResultStore, JsonDirResultStore

CONFIGS_DIR = get_default_config_path().parent


@pytest.fixture(autouse=True)
def api_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAUDE_API_KEY", "test-claude-key")
    monkeypatch.setenv("HIVE_API_KEY", "test-hive-key")


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_claude_generator_config_defaults(self) -> None:
        config = ClaudeGeneratorConfig()
        assert config.type == "claude"
        assert config.model == "claude-haiku-4-5-20251001"
        assert config.max_tokens == 2048
        assert config.max_retries == 3

    def test_limits_defaults(self) -> None:
        limits = LimitsConfig()
        assert limits.max_content_chars == 5000
        assert limits.fact_check_prompt_chars == 3000
        assert limits.bias_prompt_chars == 3000

    def test_media_policies_per_surface(self) -> None:
        limits = LimitsConfig()
        extension = limits.media_policy(Surface.EXTENSION)
        app = limits.media_policy(Surface.APP)

        assert extension.max_bytes == 10 * 1024 * 1024
        assert app.max_bytes == 50 * 1024 * 1024
        assert "image/webp" in extension.allowed_types
        assert "image/webp" not in app.allowed_types
        assert "video/quicktime" in app.allowed_types
        assert "video/quicktime" not in extension.allowed_types

    def test_heuristics_defaults(self) -> None:
        heuristics = HeuristicsConfig()
        assert heuristics.bias_margin == 1
        assert heuristics.strong_lean_threshold == 3
        assert heuristics.baseline_start == 50
        assert [g.tone.value for g in heuristics.tone_groups] == [
            "Angry",
            "Fear-inducing",
            "Hopeful",
        ]
        assert [a.points for a in heuristics.credibility_adjustments] == [
            20,
            15,
            10,
            -30,
            -20,
            -15,
        ]

    def test_root_config_defaults(self) -> None:
        config = TruthLensConfig()
        assert isinstance(config.generator, ClaudeGeneratorConfig)
        assert isinstance(config.storage, MemoryStorageConfig)
        assert config.forensics is None
        assert config.logging.enabled is False

    def test_discriminated_unions(self) -> None:
        config = TruthLensConfig.model_validate(
            {
                "generator": {"type": "static", "narrative": "hi"},
                "storage": {"type": "json_dir", "directory": "out"},
                "forensics": {"type": "hive"},
            }
        )
        assert isinstance(config.generator, StaticGeneratorConfig)
        assert config.generator.narrative == "hi"
        assert isinstance(config.storage, JsonDirStorageConfig)
        assert config.storage.directory == "out"
        assert isinstance(config.forensics, HiveForensicsConfig)

    def test_unknown_generator_type_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TruthLensConfig.model_validate({"generator": {"type": "gpt"}})

    def test_configs_are_frozen(self) -> None:
        config = LimitsConfig()
        with pytest.raises(pydantic.ValidationError):
            config.max_content_chars = 10  # type: ignore[misc]


class TestLoadConfig:
    def test_default_config_exists(self) -> None:
        assert get_default_config_path().exists()

    def test_load_default_config(self) -> None:
        config = load_config(get_default_config_path())
        assert isinstance(config.generator, ClaudeGeneratorConfig)
        assert isinstance(config.storage, MemoryStorageConfig)

    def test_load_app_config(self) -> None:
        config = load_config(CONFIGS_DIR / "app.yaml")
        assert isinstance(config.forensics, HiveForensicsConfig)
        assert isinstance(config.storage, JsonDirStorageConfig)
        assert config.logging.enabled is True

    def test_load_offline_config(self) -> None:
        config = load_config(CONFIGS_DIR / "offline.yaml")
        assert isinstance(config.generator, StaticGeneratorConfig)
        assert "CREDIBILITY SCORE: 50" in config.generator.narrative

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == TruthLensConfig()

    def test_partial_override(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text(
            "limits:\n"
            "  max_content_chars: 100\n"
            "heuristics:\n"
            "  left_keywords: [solidarity]\n"
            "  strong_lean_threshold: 0\n"
        )
        config = load_config(path)
        assert config.limits.max_content_chars == 100
        assert config.limits.bias_prompt_chars == 3000
        assert config.heuristics.left_keywords == ("solidarity",)
        assert config.heuristics.strong_lean_threshold == 0

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")


class TestFactory:
    def test_create_claude_generator(self) -> None:
        generator = create_generator(ClaudeGeneratorConfig(model="m", max_tokens=10))
        assert isinstance(generator, ClaudeNarrativeGenerator)
        assert generator._model == "m"
        assert generator._max_tokens == 10

    def test_create_static_generator(self) -> None:
        generator = create_generator(StaticGeneratorConfig(narrative="fixed"))
        assert isinstance(generator, StaticNarrativeGenerator)

    def test_create_forensics(self) -> None:
        assert create_forensics(None) is None
        forensics = create_forensics(HiveForensicsConfig(class_name="other"))
        assert isinstance(forensics, HiveForensics)
        assert forensics._class_name == "other"

    def test_create_store(self, tmp_path: Path) -> None:
        assert isinstance(create_store(MemoryStorageConfig()), InMemoryResultStore)
        store = create_store(JsonDirStorageConfig(directory=str(tmp_path)))
        assert isinstance(store, JsonDirResultStore)
        assert store.directory == tmp_path

    def test_create_from_config_without_logging(self) -> None:
        pipeline, run_logger = create_from_config(TruthLensConfig())
        assert isinstance(pipeline, AnalysisPipeline)
        assert run_logger is None

    def test_create_from_config_with_logging(self, tmp_path: Path) -> None:
        config = load_config(CONFIGS_DIR / "app.yaml")
        pipeline, run_logger = create_from_config(config, log_dir_override=str(tmp_path))
        assert isinstance(run_logger, RunLogger)
        assert run_logger.enabled
        assert isinstance(pipeline._forensics, HiveForensics)
        assert isinstance(pipeline._store, JsonDirResultStore)

    def test_log_override_disables_logging(self) -> None:
        config = load_config(CONFIGS_DIR / "app.yaml")
        _, run_logger = create_from_config(config, log_override=False)
        assert run_logger is None

    def test_log_override_enables_logging(self, tmp_path: Path) -> None:
        _, run_logger = create_from_config(
            TruthLensConfig(), log_override=True, log_dir_override=str(tmp_path)
        )
        assert run_logger is not None
