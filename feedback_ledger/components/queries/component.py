"""
Queries component - Read projections under privacy rules.

Shell Layer - converts ledger errors into outputs.

Invariants:
- I1: Queries never mutate state
- I2: Non-admins never see private content (own submissions excepted)
- I3: Unknown ids are errors; hidden data is an empty or redacted result
"""

from __future__ import annotations

from feedback_ledger.domain.errors import ErrorDetail, LedgerError

from .models import (
    FeedbackEntryListOutput,
    FeedbackIdListOutput,
    FeedbackViewOutput,
    GetFeedbackInput,
    LinkFlagInput,
    LinkFlagOutput,
    LinkIdListOutput,
    LinkSummaryListOutput,
    ListAllActiveLinksInput,
    ListByCreatorInput,
    ListBySubmitterInput,
    ListFeedbackIdsInput,
    ListFeedbacksInput,
    SubmissionListOutput,
)
from .ports import QueryLedgerPort

# --- Component Entry Points ---


def run_list_feedback_ids(
    inp: ListFeedbackIdsInput, *, ledger: QueryLedgerPort
) -> FeedbackIdListOutput:
    try:
        ids = ledger.queries().list_feedback_ids(inp.caller, inp.link_id)
    except LedgerError as e:
        return FeedbackIdListOutput(
            feedback_ids=(), total=0, errors=[ErrorDetail.from_error(e)], success=False
        )
    return FeedbackIdListOutput(feedback_ids=tuple(ids), total=len(ids))


def run_get_feedback(inp: GetFeedbackInput, *, ledger: QueryLedgerPort) -> FeedbackViewOutput:
    try:
        view = ledger.queries().get_feedback(inp.caller, inp.feedback_id)
    except LedgerError as e:
        return FeedbackViewOutput(view=None, errors=[ErrorDetail.from_error(e)], success=False)
    return FeedbackViewOutput(view=view)


def run_is_active(inp: LinkFlagInput, *, ledger: QueryLedgerPort) -> LinkFlagOutput:
    return LinkFlagOutput(link_id=inp.link_id, value=ledger.queries().is_active(inp.link_id))


def run_is_private(inp: LinkFlagInput, *, ledger: QueryLedgerPort) -> LinkFlagOutput:
    try:
        value = ledger.queries().is_private(inp.link_id)
    except LedgerError as e:
        return LinkFlagOutput(
            link_id=inp.link_id, value=None, errors=[ErrorDetail.from_error(e)], success=False
        )
    return LinkFlagOutput(link_id=inp.link_id, value=value)


def run_list_active_public_links(*, ledger: QueryLedgerPort) -> LinkIdListOutput:
    ids = ledger.queries().list_active_public_links()
    return LinkIdListOutput(link_ids=tuple(ids), total=len(ids))


def run_list_all_active_links(
    inp: ListAllActiveLinksInput, *, ledger: QueryLedgerPort
) -> LinkIdListOutput:
    try:
        ids = ledger.queries().list_all_active_links(inp.caller)
    except LedgerError as e:
        return LinkIdListOutput(
            link_ids=(), total=0, errors=[ErrorDetail.from_error(e)], success=False
        )
    return LinkIdListOutput(link_ids=tuple(ids), total=len(ids))


def run_list_by_creator(
    inp: ListByCreatorInput, *, ledger: QueryLedgerPort
) -> LinkSummaryListOutput:
    links = ledger.queries().list_by_creator(inp.creator)
    return LinkSummaryListOutput(links=tuple(links), total=len(links))


def run_list_by_submitter(
    inp: ListBySubmitterInput, *, ledger: QueryLedgerPort
) -> SubmissionListOutput:
    try:
        items = ledger.queries().list_feedback_by_submitter(inp.caller, inp.link_id, inp.submitter)
    except LedgerError as e:
        return SubmissionListOutput(
            submissions=(), total=0, errors=[ErrorDetail.from_error(e)], success=False
        )
    return SubmissionListOutput(submissions=tuple(items), total=len(items))


def run_list_feedbacks(
    inp: ListFeedbacksInput, *, ledger: QueryLedgerPort
) -> FeedbackEntryListOutput:
    try:
        entries = ledger.queries().list_feedbacks(inp.link_id, caller=inp.caller)
    except LedgerError as e:
        return FeedbackEntryListOutput(
            entries=(), total=0, errors=[ErrorDetail.from_error(e)], success=False
        )
    return FeedbackEntryListOutput(entries=tuple(entries), total=len(entries))
