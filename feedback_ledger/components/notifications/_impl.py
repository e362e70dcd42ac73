"""
NotificationService - reads over the committed notification journal.

Key behaviors:
- Records are appended by the ledger at commit, never here
- Records come back in sequence order
- Query by kind and by sequence cursor
"""

from __future__ import annotations

import logging
from pathlib import Path

from feedback_ledger.adapters.memory_journal import InMemoryJournal
from feedback_ledger.adapters.sqlite_journal import SQLiteJournal
from feedback_ledger.domain.notifications import JournalQuery, JournalRecord
from feedback_ledger.ports.journal import NotificationJournalPort
from feedback_ledger.rules.models import JournalRules

logger = logging.getLogger(__name__)

MAX_LIMIT = 1000


class NotificationService:
    def __init__(self, journal: NotificationJournalPort) -> None:
        self._journal = journal

    def history(self, query: JournalQuery) -> list[JournalRecord]:
        if not 1 <= query.limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LIMIT}")
        return self._journal.query(query)

    def count(self, query: JournalQuery) -> int:
        return self._journal.count(query)


def create_journal(rules: JournalRules, data_dir: Path) -> NotificationJournalPort:
    """Build the journal adapter configured in rules."""
    if rules.backend == "sqlite":
        db_path = data_dir / rules.path
        logger.info("Using SQLite notification journal at %s", db_path)
        return SQLiteJournal(db_path)
    return InMemoryJournal()
