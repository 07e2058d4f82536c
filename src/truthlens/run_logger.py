"""Run logger for recording pipeline stages to JSON files."""

import dataclasses
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from truthlens.data import MediaSubmission, Usage


class StageRecord(BaseModel):
    """Record of a single pipeline stage execution."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    usage: dict[str, Any] | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of a complete pipeline run."""

    run_id: str
    kind: str
    surface: str
    submission: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    result_id: str | None = None
    error: str | None = None
    total_usage: dict[str, Any] | None = None


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, enums, tuples, lists, dicts and
    primitives. Media payloads are reduced to their size, and Usage
    objects include computed token totals.
    """
    if obj is None:
        return None
    if isinstance(obj, Usage):
        return {
            "api_calls": [_serialize(c) for c in obj.api_calls],
            "fetch_requests": obj.fetch_requests,
            "forensics_requests": obj.forensics_requests,
            "input_tokens": obj.input_tokens,
            "output_tokens": obj.output_tokens,
        }
    if isinstance(obj, MediaSubmission):
        return {"filename": obj.filename, "content_type": obj.content_type, "size": obj.size}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _serialize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, bytes):
        return {"bytes": len(obj)}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Builds one stage record per pipeline run and writes it as JSON.

    The logger itself holds no per-run state: ``start_run`` hands back a
    ``RunRecord`` that the caller threads through ``log_stage`` and
    ``finish_run``, so one logger can serve concurrent runs.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, run_id: str, kind: str, surface: str, submission: Any) -> RunRecord | None:
        """Create the record for a new run.

        Args:
            run_id: Request identifier of the run.
            kind: Analysis kind.
            surface: Surface the request arrived on.
            submission: The pipeline input.

        Returns:
            The new record, or None if logging is disabled.
        """
        if not self._enabled:
            return None

        return RunRecord(
            run_id=run_id,
            kind=str(kind),
            surface=str(surface),
            submission=_serialize(submission),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        record: RunRecord | None,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        usage: Usage | None,
        duration_seconds: float,
    ) -> None:
        """Append a stage record to ``record``.

        Args:
            record: Record returned by ``start_run``.
            stage: Stage name (e.g. "normalize", "generate").
            component: Component class or function name.
            input_data: Stage input (will be serialized).
            output_data: Stage output (will be serialized).
            usage: Usage for this stage (None for local stages).
            duration_seconds: Wall-clock time for this stage.
        """
        if not self._enabled or record is None:
            return

        record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=_serialize(input_data),
                output=_serialize(output_data),
                usage=_serialize(usage) if usage is not None else None,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        record: RunRecord | None,
        *,
        result_id: str | None,
        usage: Usage | None,
        error: str | None = None,
    ) -> Path | None:
        """Write ``record`` to a JSON file.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or record is None:
            return None

        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.result_id = result_id
        record.error = error
        record.total_usage = _serialize(usage) if usage is not None else None

        self._log_dir.mkdir(parents=True, exist_ok=True)
        filepath = self._log_dir / f"run_{record.run_id}.json"
        filepath.write_text(record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
