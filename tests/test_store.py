"""Tests for result stores and notifiers."""

import json
from pathlib import Path

import pytest

from truthlens.assembler import assemble
from truthlens.data import (
    AnalysisKind,
    AnalysisResult,
    BiasHeuristic,
    ExtractedFields,
    PoliticalLeaning,
)
from truthlens.errors import StorageError
from truthlens.store import (
    NOTIFICATION_TEMPLATES,
    InMemoryResultStore,
    JsonDirResultStore,
    LoggingNotifier,
)


@pytest.fixture
def result() -> AnalysisResult:
    return assemble(
        BiasHeuristic(leaning=PoliticalLeaning.CENTER_RIGHT, indicators=("vague attribution",)),
        ExtractedFields(score=55, bias_detected=False, recommendations=("Read widely",)),
        "**OBJECTIVITY SCORE: 55**",
        AnalysisKind.BIAS,
        content="Some article text.",
    )


class TestInMemoryResultStore:
    async def test_store_and_get(self, result: AnalysisResult) -> None:
        store = InMemoryResultStore()
        result_id = await store.store(result, user_id="u1")

        assert result_id == result.id
        assert store.get(result_id) is result
        assert store.owner(result_id) == "u1"
        assert len(store) == 1

    async def test_duplicate_insert_rejected(self, result: AnalysisResult) -> None:
        store = InMemoryResultStore()
        await store.store(result)
        with pytest.raises(StorageError):
            await store.store(result)
        assert len(store) == 1

    def test_unknown_id(self) -> None:
        store = InMemoryResultStore()
        assert store.get("missing") is None
        assert store.owner("missing") is None


class TestJsonDirResultStore:
    async def test_writes_one_file_per_result(
        self, result: AnalysisResult, tmp_path: Path
    ) -> None:
        store = JsonDirResultStore(tmp_path / "results")
        result_id = await store.store(result, user_id="u1")

        path = tmp_path / "results" / f"{result_id}.json"
        data = json.loads(path.read_text())
        assert data["user_id"] == "u1"
        assert data["stored_at"]
        assert data["result"]["id"] == result.id
        assert data["result"]["kind"] == "bias"
        assert data["result"]["leaning"] == "Center-Right"
        assert data["result"]["indicators"] == ["vague attribution"]

    async def test_load_round_trips(self, result: AnalysisResult, tmp_path: Path) -> None:
        store = JsonDirResultStore(tmp_path)
        result_id = await store.store(result)
        assert store.load(result_id) == result

    async def test_existing_record_is_not_overwritten(
        self, result: AnalysisResult, tmp_path: Path
    ) -> None:
        store = JsonDirResultStore(tmp_path)
        await store.store(result, user_id="first")
        with pytest.raises(StorageError):
            await store.store(result, user_id="second")

        data = json.loads((tmp_path / f"{result.id}.json").read_text())
        assert data["user_id"] == "first"

    async def test_unwritable_directory(self, result: AnalysisResult, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = JsonDirResultStore(blocker / "results")

        with pytest.raises(StorageError) as exc_info:
            await store.store(result)
        assert exc_info.value.status_code == 500


class TestLoggingNotifier:
    @pytest.mark.parametrize("kind", list(AnalysisKind))
    async def test_uses_kind_template(self, kind: AnalysisKind) -> None:
        notifier = LoggingNotifier(keep_history=True)
        await notifier.notify("u1", kind, "result-1")

        template = NOTIFICATION_TEMPLATES[kind]
        assert notifier.sent == [("u1", template.title, template.message, "result-1")]

    def test_every_kind_has_a_template(self) -> None:
        assert set(NOTIFICATION_TEMPLATES) == set(AnalysisKind)

    async def test_history_is_off_by_default(self) -> None:
        notifier = LoggingNotifier()
        await notifier.notify("u1", AnalysisKind.BIAS, "result-1")
        assert notifier.sent == []
