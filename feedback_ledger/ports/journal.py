from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from feedback_ledger.domain.notifications import JournalQuery, JournalRecord, Notification


class NotificationJournalPort(Protocol):
    """Append-only store of committed notifications."""

    def append(
        self,
        notifications: Sequence[Notification],
        *,
        ledger_version: int,
        recorded_at: datetime,
    ) -> list[JournalRecord]:
        """Persist notifications of one commit; all or none."""
        ...

    def query(self, query: JournalQuery) -> list[JournalRecord]:
        """List records in sequence order."""
        ...

    def count(self, query: JournalQuery) -> int:
        """Count records matching query (ignores limit)."""
        ...
