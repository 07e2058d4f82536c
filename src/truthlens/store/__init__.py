"""Persistence and notification collaborators."""

from truthlens.store.base import Notifier, ResultStore
from truthlens.store.json_dir import JsonDirResultStore, StoredResult
from truthlens.store.memory import InMemoryResultStore
from truthlens.store.notify import NOTIFICATION_TEMPLATES, LoggingNotifier, NotificationTemplate

__all__ = [
    "InMemoryResultStore",
    "JsonDirResultStore",
    "LoggingNotifier",
    "NOTIFICATION_TEMPLATES",
    "NotificationTemplate",
    "Notifier",
    "ResultStore",
    "StoredResult",
]
