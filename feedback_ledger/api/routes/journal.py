"""Routes for reading the notification journal."""

from fastapi import APIRouter, Query

from feedback_ledger.api.deps import LedgerDep
from feedback_ledger.api.errors import raise_for_errors
from feedback_ledger.api.schemas import JournalListResponse, JournalRecordResponse
from feedback_ledger.components.notifications import ListNotificationsInput, run_list
from feedback_ledger.domain.notifications import NotificationKind

router = APIRouter()


@router.get("", response_model=JournalListResponse)
def list_journal(
    ledger: LedgerDep,
    kind: NotificationKind | None = None,
    since: int | None = None,
    limit: int = Query(default=100),
) -> JournalListResponse:
    """Committed notifications after an optional sequence cursor."""
    result = run_list(
        ListNotificationsInput(kind=kind, since=since, limit=limit),
        journal=ledger.journal,
    )
    raise_for_errors(result.errors)
    return JournalListResponse(
        items=[
            JournalRecordResponse(
                sequence=record.sequence,
                ledger_version=record.ledger_version,
                recorded_at=record.recorded_at,
                kind=record.notification.kind,
                payload=record.notification.model_dump(mode="json"),
            )
            for record in result.records
        ],
        total=result.total,
    )
