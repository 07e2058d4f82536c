"""Completion notifications."""

import logging
from dataclasses import dataclass

from truthlens.data import AnalysisKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationTemplate:
    title: str
    message: str


NOTIFICATION_TEMPLATES: dict[AnalysisKind, NotificationTemplate] = {
    AnalysisKind.FACT_CHECK: NotificationTemplate(
        title="Fact Check Complete",
        message="Your fact check analysis is ready to view.",
    ),
    AnalysisKind.BIAS: NotificationTemplate(
        title="Bias Analysis Complete",
        message="Your bias analysis is ready to view.",
    ),
    AnalysisKind.MEDIA_AUTHENTICITY: NotificationTemplate(
        title="Media Verification Complete",
        message="Your media verification analysis is ready to view.",
    ),
}


class LoggingNotifier:
    """Notifier that writes templated completion messages to the log.

    Args:
        keep_history: If True, ``sent`` keeps every delivered notification
            as ``(user_id, title, message, result_id)`` in order. Off by
            default.
    """

    def __init__(self, *, keep_history: bool = False) -> None:
        self._keep_history = keep_history
        self.sent: list[tuple[str, str, str, str]] = []

    async def notify(self, user_id: str, kind: AnalysisKind, result_id: str) -> None:
        template = NOTIFICATION_TEMPLATES[kind]
        if self._keep_history:
            self.sent.append((user_id, template.title, template.message, result_id))
        logger.info("Notify %s: %s (%s)", user_id, template.title, result_id)
