"""
Feedback component - Feedback submission.

Shell Layer - converts ledger errors into operation outputs.

Invariants:
- I1: Content is non-empty
- I2: Only live, active links accept feedback
- I3: Private links accept feedback from admins only
- I4: Records are immutable once written
"""

from __future__ import annotations

from feedback_ledger.domain.errors import ErrorDetail, LedgerError

from .models import (
    FeedbackOperationOutput,
    FeedbackRecordOutput,
    GetFeedbackRecordInput,
    SubmitFeedbackInput,
)
from .ports import FeedbackLedgerPort


def run_submit(inp: SubmitFeedbackInput, *, ledger: FeedbackLedgerPort) -> FeedbackOperationOutput:
    """Submit feedback to a link."""
    try:
        event = ledger.submit_feedback(inp.caller, inp.link_id, inp.content)
    except LedgerError as e:
        return FeedbackOperationOutput(
            feedback_id=None,
            notification=None,
            errors=[ErrorDetail.from_error(e)],
            success=False,
        )
    return FeedbackOperationOutput(feedback_id=event.feedback_id, notification=event)


def run_get_record(
    inp: GetFeedbackRecordInput, *, ledger: FeedbackLedgerPort
) -> FeedbackRecordOutput:
    """Fetch a raw feedback record."""
    try:
        feedback = ledger.get_feedback_record(inp.feedback_id)
    except LedgerError as e:
        return FeedbackRecordOutput(feedback=None, errors=[ErrorDetail.from_error(e)], success=False)
    return FeedbackRecordOutput(feedback=feedback)
