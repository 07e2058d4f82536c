"""Protocols for the persistence and notification collaborators."""

from typing import Protocol

from truthlens.data import AnalysisKind, AnalysisResult


class ResultStore(Protocol):
    """Interface for persisting assembled results."""

    async def store(self, result: AnalysisResult, *, user_id: str | None = None) -> str:
        """Persist ``result``.

        Inserts are not idempotent, so callers must not retry blindly.

        Args:
            result: The assembled result.
            user_id: Owner of the result, if any.

        Returns:
            The stored record's id.

        Raises:
            StorageError: If the write fails.
        """
        ...


class Notifier(Protocol):
    """Interface for telling a user that an analysis is ready."""

    async def notify(self, user_id: str, kind: AnalysisKind, result_id: str) -> None:
        """Send a completion notification. Best-effort."""
        ...
