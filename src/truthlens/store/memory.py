"""In-process result store."""

from truthlens.data import AnalysisResult
from truthlens.errors import StorageError


class InMemoryResultStore:
    """Keep results in a dict keyed by result id.

    A second insert with the same id is rejected rather than overwriting
    the first record.
    """

    def __init__(self) -> None:
        self._records: dict[str, tuple[AnalysisResult, str | None]] = {}

    def __len__(self) -> int:
        return len(self._records)

    def get(self, result_id: str) -> AnalysisResult | None:
        record = self._records.get(result_id)
        return record[0] if record else None

    def owner(self, result_id: str) -> str | None:
        record = self._records.get(result_id)
        return record[1] if record else None

    async def store(self, result: AnalysisResult, *, user_id: str | None = None) -> str:
        if result.id in self._records:
            raise StorageError("Failed to store analysis result.")
        self._records[result.id] = (result, user_id)
        return result.id
