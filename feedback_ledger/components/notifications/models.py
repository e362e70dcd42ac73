"""
Notifications component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from feedback_ledger.domain.errors import ErrorDetail
from feedback_ledger.domain.notifications import JournalRecord, NotificationKind


@dataclass(frozen=True)
class ListNotificationsInput:
    """Input for reading the notification journal."""

    kind: NotificationKind | None = None
    since: int | None = None
    limit: int = 100


@dataclass(frozen=True)
class NotificationListOutput:
    """Output for a journal read."""

    records: tuple[JournalRecord, ...]
    total: int
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True
