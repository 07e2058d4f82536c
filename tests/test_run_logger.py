"""Tests for RunLogger and serialization helpers."""

import json
from pathlib import Path

from truthlens.data import (
    AnalysisKind,
    APICallUsage,
    BiasHeuristic,
    MediaSubmission,
    PoliticalLeaning,
    Submission,
    Usage,
)
from truthlens.run_logger import RunLogger, _serialize

# -- _serialize tests --


def test_serialize_none() -> None:
    assert _serialize(None) is None


def test_serialize_primitive() -> None:
    assert _serialize(42) == 42
    assert _serialize("hello") == "hello"
    assert _serialize(True) is True


def test_serialize_dataclass_with_enums() -> None:
    result = _serialize(Submission(content="text", kind=AnalysisKind.BIAS))
    assert result == {"content": "text", "kind": "bias", "source_url": None}


def test_serialize_tuple_fields() -> None:
    heuristic = BiasHeuristic(leaning=PoliticalLeaning.LEFT, indicators=("a", "b"))
    result = _serialize(heuristic)
    assert result["leaning"] == "Left"
    assert result["tone"] == "Neutral"
    assert result["indicators"] == ["a", "b"]


def test_serialize_media_omits_payload() -> None:
    media = MediaSubmission(filename="a.png", content_type="image/png", data=b"12345")
    assert _serialize(media) == {"filename": "a.png", "content_type": "image/png", "size": 5}


def test_serialize_bytes() -> None:
    assert _serialize(b"abc") == {"bytes": 3}


def test_serialize_path() -> None:
    assert _serialize(Path("/tmp/x")) == "/tmp/x"


def test_serialize_usage_includes_computed_properties() -> None:
    usage = Usage(
        api_calls=[
            APICallUsage(model="m1", input_tokens=100, output_tokens=50),
            APICallUsage(model="m2", input_tokens=200, output_tokens=75),
        ],
        fetch_requests=1,
        forensics_requests=2,
    )
    result = _serialize(usage)
    assert result["input_tokens"] == 300
    assert result["output_tokens"] == 125
    assert result["fetch_requests"] == 1
    assert result["forensics_requests"] == 2
    assert len(result["api_calls"]) == 2
    assert result["api_calls"][0]["model"] == "m1"


# -- RunLogger tests --


def test_disabled_logger_is_noop(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path / "logs", enabled=False)

    record = run_logger.start_run("r1", AnalysisKind.BIAS, "extension", {"content": "x"})
    run_logger.log_stage(record, "normalize", "Normalizer", None, None, None, 0.1)
    path = run_logger.finish_run(record, result_id="id", usage=Usage())

    assert record is None
    assert path is None
    assert run_logger.enabled is False
    assert run_logger.last_log_path is None
    assert not (tmp_path / "logs").exists()


def test_full_run_writes_json(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path)
    submission = Submission(content="claim", kind=AnalysisKind.FACT_CHECK)

    record = run_logger.start_run("req_1", AnalysisKind.FACT_CHECK, "app", submission)
    run_logger.log_stage(
        record,
        "generate",
        "StaticNarrativeGenerator",
        input_data={"prompt": "p"},
        output_data={"chars": 10},
        usage=Usage(api_calls=[APICallUsage(model="m", input_tokens=5, output_tokens=3)]),
        duration_seconds=0.123456,
    )
    path = run_logger.finish_run(
        record,
        result_id="result-1",
        usage=Usage(api_calls=[APICallUsage(model="m", input_tokens=5, output_tokens=3)]),
    )

    assert path == tmp_path / "run_req_1.json"
    assert run_logger.last_log_path == path

    data = json.loads(path.read_text())
    assert data["run_id"] == "req_1"
    assert data["kind"] == "fact_check"
    assert data["surface"] == "app"
    assert data["submission"]["content"] == "claim"
    assert data["completed_at"] is not None
    assert data["result_id"] == "result-1"
    assert data["error"] is None
    assert data["total_usage"]["input_tokens"] == 5

    stage = data["stages"][0]
    assert stage["stage"] == "generate"
    assert stage["component"] == "StaticNarrativeGenerator"
    assert stage["output"] == {"chars": 10}
    assert stage["usage"]["output_tokens"] == 3
    assert stage["duration_seconds"] == 0.1235


def test_records_are_independent(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path)
    first = run_logger.start_run("a", AnalysisKind.BIAS, "extension", {})
    second = run_logger.start_run("b", AnalysisKind.BIAS, "extension", {})

    run_logger.log_stage(first, "normalize", "Normalizer", None, None, None, 0.0)

    assert first is not None and second is not None
    assert len(first.stages) == 1
    assert second.stages == []


def test_error_is_recorded(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path)
    record = run_logger.start_run("err", AnalysisKind.BIAS, "extension", {})
    path = run_logger.finish_run(record, result_id=None, usage=None, error="boom")

    assert path is not None
    data = json.loads(path.read_text())
    assert data["error"] == "boom"
    assert data["total_usage"] is None
