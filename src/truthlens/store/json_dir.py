"""Result store writing one JSON file per record."""

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, TypeAdapter

from truthlens.data import AnalysisResult
from truthlens.errors import StorageError

logger = logging.getLogger(__name__)

_RESULT_ADAPTER: TypeAdapter[AnalysisResult] = TypeAdapter(AnalysisResult)


class StoredResult(BaseModel):
    """On-disk envelope for one result."""

    user_id: str | None = None
    stored_at: str
    result: dict[str, Any]


class JsonDirResultStore:
    """Write each result to ``<directory>/<id>.json``.

    Files are created exclusively, so an existing record is never
    overwritten.

    Args:
        directory: Target directory, created on first write.
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def load(self, result_id: str) -> AnalysisResult:
        """Read a stored result back."""
        path = self._directory / f"{result_id}.json"
        envelope = StoredResult.model_validate_json(path.read_text())
        return _RESULT_ADAPTER.validate_python(envelope.result)

    async def store(self, result: AnalysisResult, *, user_id: str | None = None) -> str:
        envelope = StoredResult(
            user_id=user_id,
            stored_at=datetime.now(tz=UTC).isoformat(),
            result=_RESULT_ADAPTER.dump_python(result, mode="json"),
        )
        path = self._directory / f"{result.id}.json"
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with path.open("x") as f:
                f.write(envelope.model_dump_json(indent=2))
        except OSError as e:
            logger.error("Failed to write result %s to %s: %s", result.id, path, e)
            raise StorageError("Failed to store analysis result.") from e
        return result.id
