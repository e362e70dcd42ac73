import json
import sqlite3
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from feedback_ledger.domain.notifications import (
    JournalQuery,
    JournalRecord,
    Notification,
    notification_adapter,
)

SCHEMA = """
CREATE TABLE IF NOT EXISTS notifications (
    sequence INTEGER PRIMARY KEY,
    ledger_version INTEGER NOT NULL,
    kind TEXT NOT NULL,
    recorded_at TEXT NOT NULL,
    payload TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS ix_notifications_kind ON notifications (kind, sequence);
"""


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteJournal:
    def __init__(self, db_path: str | Path):
        self.db_path = str(db_path)
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = self._get_conn()
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def append(
        self,
        notifications: Sequence[Notification],
        *,
        ledger_version: int,
        recorded_at: datetime,
    ) -> list[JournalRecord]:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT COALESCE(MAX(sequence), -1) AS last FROM notifications").fetchone()
            start = row["last"] + 1
            records = []
            for offset, notification in enumerate(notifications):
                record = JournalRecord(
                    sequence=start + offset,
                    ledger_version=ledger_version,
                    recorded_at=recorded_at,
                    notification=notification,
                )
                conn.execute(
                    "INSERT INTO notifications (sequence, ledger_version, kind, recorded_at, payload) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (
                        record.sequence,
                        record.ledger_version,
                        notification.kind,
                        recorded_at.isoformat(),
                        notification.model_dump_json(),
                    ),
                )
                records.append(record)
            conn.commit()
            return records
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _where(self, query: JournalQuery) -> tuple[str, list[Any]]:
        clauses = []
        params: list[Any] = []
        if query.kind:
            clauses.append("kind = ?")
            params.append(query.kind)
        if query.since is not None:
            clauses.append("sequence > ?")
            params.append(query.since)
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        return where, params

    def query(self, query: JournalQuery) -> list[JournalRecord]:
        where, params = self._where(query)
        conn = self._get_conn()
        try:
            rows = conn.execute(
                f"SELECT * FROM notifications{where} ORDER BY sequence LIMIT ?",
                (*params, query.limit),
            ).fetchall()
        finally:
            conn.close()
        return [self._map_row(row) for row in rows]

    def count(self, query: JournalQuery) -> int:
        where, params = self._where(query)
        conn = self._get_conn()
        try:
            row = conn.execute(f"SELECT COUNT(*) AS n FROM notifications{where}", params).fetchone()
        finally:
            conn.close()
        return int(row["n"])

    def _map_row(self, row: dict[str, Any]) -> JournalRecord:
        return JournalRecord(
            sequence=row["sequence"],
            ledger_version=row["ledger_version"],
            recorded_at=datetime.fromisoformat(row["recorded_at"]),
            notification=notification_adapter.validate_python(json.loads(row["payload"])),
        )
