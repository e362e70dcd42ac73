from collections.abc import Sequence
from datetime import datetime

from feedback_ledger.domain.notifications import JournalQuery, JournalRecord, Notification


class InMemoryJournal:
    """In-memory notification journal for tests/dev."""

    def __init__(self) -> None:
        self._records: list[JournalRecord] = []

    def append(
        self,
        notifications: Sequence[Notification],
        *,
        ledger_version: int,
        recorded_at: datetime,
    ) -> list[JournalRecord]:
        start = len(self._records)
        records = [
            JournalRecord(
                sequence=start + offset,
                ledger_version=ledger_version,
                recorded_at=recorded_at,
                notification=notification,
            )
            for offset, notification in enumerate(notifications)
        ]
        self._records.extend(records)
        return records

    def _matching(self, query: JournalQuery) -> list[JournalRecord]:
        results = self._records
        if query.kind:
            results = [r for r in results if r.notification.kind == query.kind]
        if query.since is not None:
            results = [r for r in results if r.sequence > query.since]
        return results

    def query(self, query: JournalQuery) -> list[JournalRecord]:
        return self._matching(query)[: query.limit]

    def count(self, query: JournalQuery) -> int:
        return len(self._matching(query))

    def clear(self) -> None:
        """Clear all records (for testing)."""
        self._records.clear()
