"""Routes for feedback submission and feedback queries."""

from fastapi import APIRouter

from feedback_ledger.api.deps import AuthenticatedCallerDep, CallerDep, LedgerDep
from feedback_ledger.api.errors import raise_for_errors
from feedback_ledger.api.schemas import (
    FeedbackEntryListResponse,
    FeedbackEntryResponse,
    FeedbackIdListResponse,
    FeedbackResponse,
    FeedbackSubmitRequest,
    FeedbackSubmittedResponse,
    SubmissionListResponse,
    SubmissionResponse,
)
from feedback_ledger.components.feedback import SubmitFeedbackInput, run_submit
from feedback_ledger.components.queries import (
    GetFeedbackInput,
    ListBySubmitterInput,
    ListFeedbackIdsInput,
    ListFeedbacksInput,
    run_get_feedback,
    run_list_by_submitter,
    run_list_feedback_ids,
    run_list_feedbacks,
)

router = APIRouter()


@router.post(
    "/links/{link_id}/feedback",
    response_model=FeedbackSubmittedResponse,
    status_code=201,
)
def submit_feedback(
    link_id: str,
    data: FeedbackSubmitRequest,
    caller: AuthenticatedCallerDep,
    ledger: LedgerDep,
) -> FeedbackSubmittedResponse:
    result = run_submit(
        SubmitFeedbackInput(caller=caller, link_id=link_id, content=data.content),
        ledger=ledger,
    )
    raise_for_errors(result.errors)

    event = result.notification
    assert event is not None
    return FeedbackSubmittedResponse(
        feedback_id=event.feedback_id,
        link_id=event.link_id,
        author=event.author,
        timestamp=event.timestamp,
        is_active=event.is_active,
        is_private=event.is_private,
    )


@router.get("/links/{link_id}/feedback", response_model=FeedbackEntryListResponse)
def list_feedbacks(link_id: str, caller: CallerDep, ledger: LedgerDep) -> FeedbackEntryListResponse:
    result = run_list_feedbacks(ListFeedbacksInput(link_id=link_id, caller=caller), ledger=ledger)
    raise_for_errors(result.errors)
    return FeedbackEntryListResponse(
        items=[
            FeedbackEntryResponse(
                feedback_id=entry.feedback_id,
                content=entry.content,
                author=entry.author,
                timestamp=entry.timestamp,
            )
            for entry in result.entries
        ],
        total=result.total,
    )


@router.get("/links/{link_id}/feedback/ids", response_model=FeedbackIdListResponse)
def list_feedback_ids(link_id: str, caller: CallerDep, ledger: LedgerDep) -> FeedbackIdListResponse:
    result = run_list_feedback_ids(
        ListFeedbackIdsInput(caller=caller, link_id=link_id), ledger=ledger
    )
    raise_for_errors(result.errors)
    return FeedbackIdListResponse(items=list(result.feedback_ids), total=result.total)


@router.get("/links/{link_id}/feedback/by/{submitter}", response_model=SubmissionListResponse)
def list_by_submitter(
    link_id: str,
    submitter: str,
    caller: CallerDep,
    ledger: LedgerDep,
) -> SubmissionListResponse:
    result = run_list_by_submitter(
        ListBySubmitterInput(caller=caller, link_id=link_id, submitter=submitter),
        ledger=ledger,
    )
    raise_for_errors(result.errors)
    return SubmissionListResponse(
        items=[
            SubmissionResponse(
                feedback_id=item.feedback_id,
                content=item.content,
                timestamp=item.timestamp,
            )
            for item in result.submissions
        ],
        total=result.total,
    )


@router.get("/feedback/{feedback_id}", response_model=FeedbackResponse)
def get_feedback(feedback_id: int, caller: CallerDep, ledger: LedgerDep) -> FeedbackResponse:
    result = run_get_feedback(GetFeedbackInput(caller=caller, feedback_id=feedback_id), ledger=ledger)
    raise_for_errors(result.errors)

    view = result.view
    assert view is not None
    return FeedbackResponse(
        feedback_id=feedback_id,
        content=view.content,
        timestamp=view.timestamp,
        author=view.author,
    )
