"""
Notifications component - Journal of committed state changes.

Invariants:
- I1: One record per successful mutation, none on failure
- I2: Records are immutable and sequence ordered
"""

from __future__ import annotations

from pydantic import ValidationError

from feedback_ledger.domain.errors import ErrorDetail
from feedback_ledger.domain.notifications import JournalQuery

from ._impl import NotificationService
from .models import ListNotificationsInput, NotificationListOutput
from .ports import NotificationJournalPort


def _failed(code: str, message: str, field: str | None = None) -> NotificationListOutput:
    return NotificationListOutput(
        records=(),
        total=0,
        errors=[ErrorDetail(code=code, message=message, field=field)],
        success=False,
    )


def run_list(
    inp: ListNotificationsInput,
    *,
    journal: NotificationJournalPort,
) -> NotificationListOutput:
    """Read journal records after an optional cursor."""
    service = NotificationService(journal)

    try:
        query = JournalQuery(kind=inp.kind, since=inp.since, limit=inp.limit)
    except ValidationError as e:
        return _failed("invalid_query", str(e))

    try:
        records = service.history(query)
    except ValueError as e:
        return _failed("invalid_limit", str(e), "limit")

    return NotificationListOutput(records=tuple(records), total=service.count(query))
