"""
Queries component - Projections and input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from feedback_ledger.domain.entities import NULL_PRINCIPAL, Principal
from feedback_ledger.domain.errors import ErrorDetail

# --- Projections ---


@dataclass(frozen=True)
class FeedbackView:
    """Single feedback as seen by a caller; content may be redacted."""

    content: bytes
    timestamp: datetime
    author: Principal


@dataclass(frozen=True)
class LinkSummary:
    """Creator-facing link metadata."""

    link_id: str
    topic: bytes
    description: bytes
    is_active: bool
    is_private: bool
    is_deleted: bool
    feedback_count: int


@dataclass(frozen=True)
class Submission:
    """Feedback of one submitter on one link."""

    content: bytes
    timestamp: datetime
    feedback_id: int


@dataclass(frozen=True)
class FeedbackEntry:
    """Full feedback row of a link."""

    content: bytes
    author: Principal
    timestamp: datetime
    feedback_id: int


# --- Input Models ---


@dataclass(frozen=True)
class ListFeedbackIdsInput:
    caller: Principal
    link_id: str


@dataclass(frozen=True)
class GetFeedbackInput:
    caller: Principal
    feedback_id: int


@dataclass(frozen=True)
class LinkFlagInput:
    link_id: str


@dataclass(frozen=True)
class ListAllActiveLinksInput:
    caller: Principal


@dataclass(frozen=True)
class ListByCreatorInput:
    creator: Principal


@dataclass(frozen=True)
class ListBySubmitterInput:
    caller: Principal
    link_id: str
    submitter: Principal


@dataclass(frozen=True)
class ListFeedbacksInput:
    link_id: str
    caller: Principal = NULL_PRINCIPAL


# --- Output Models ---


@dataclass(frozen=True)
class LinkIdListOutput:
    link_ids: tuple[str, ...]
    total: int
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class FeedbackIdListOutput:
    feedback_ids: tuple[int, ...]
    total: int
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class FeedbackViewOutput:
    view: FeedbackView | None
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class LinkFlagOutput:
    link_id: str
    value: bool | None
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class LinkSummaryListOutput:
    links: tuple[LinkSummary, ...]
    total: int


@dataclass(frozen=True)
class SubmissionListOutput:
    submissions: tuple[Submission, ...]
    total: int
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class FeedbackEntryListOutput:
    entries: tuple[FeedbackEntry, ...]
    total: int
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True
