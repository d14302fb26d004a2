"""Notification center for transient user messages."""

import logging
from collections import deque
from typing import Optional

from sololife.config import DEFAULT_NOTIFICATION_BUFFER_SIZE
from sololife.models.notifications import Notification, NotificationKind

logger = logging.getLogger(__name__)


class NotificationCenter:
    """Collects fire-and-forget notifications until the host shows them."""

    def __init__(self, max_pending: int = DEFAULT_NOTIFICATION_BUFFER_SIZE) -> None:
        """Initialize with a bounded buffer; the oldest notifications are dropped first."""
        self._pending: deque[Notification] = deque(maxlen=max_pending)
        self._next_sequence = 0

    def notify(self, content: str, kind: NotificationKind = NotificationKind.INFO) -> Notification:
        """Raise a notification. No acknowledgment is expected."""
        notification = Notification(
            sequence_number=self._next_sequence,
            kind=kind,
            content=content,
        )
        self._next_sequence += 1
        self._pending.append(notification)

        if kind == NotificationKind.ERROR:
            logger.warning(f"Notify [{kind.value}]: {content}")
        else:
            logger.info(f"Notify [{kind.value}]: {content}")
        return notification

    def drain(self) -> list[Notification]:
        """Return pending notifications and clear them."""
        notifications = list(self._pending)
        self._pending.clear()
        return notifications

    def recent(self) -> list[Notification]:
        """Pending notifications without clearing them."""
        return list(self._pending)

    def latest(self) -> Optional[Notification]:
        """The most recent pending notification."""
        if self._pending:
            return self._pending[-1]
        return None
