"""
Feedback component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from feedback_ledger.domain.entities import Feedback, Principal
from feedback_ledger.domain.errors import ErrorDetail
from feedback_ledger.domain.notifications import FeedbackSubmitted

# --- Input Models ---


@dataclass(frozen=True)
class SubmitFeedbackInput:
    """Input for submitting feedback to a link."""

    caller: Principal
    link_id: str
    content: bytes


@dataclass(frozen=True)
class GetFeedbackRecordInput:
    """Input for fetching a raw feedback record."""

    feedback_id: int


# --- Output Models ---


@dataclass(frozen=True)
class FeedbackOperationOutput:
    """Output from a submission."""

    feedback_id: int | None
    notification: FeedbackSubmitted | None
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class FeedbackRecordOutput:
    """Output from a raw record lookup."""

    feedback: Feedback | None
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True
