"""
Queries component - Read-only projections over links and feedback.
"""

from ._impl import QueryEngine
from .component import (
    run_get_feedback,
    run_is_active,
    run_is_private,
    run_list_active_public_links,
    run_list_all_active_links,
    run_list_by_creator,
    run_list_by_submitter,
    run_list_feedback_ids,
    run_list_feedbacks,
)
from .models import (
    FeedbackEntry,
    FeedbackEntryListOutput,
    FeedbackIdListOutput,
    FeedbackView,
    FeedbackViewOutput,
    GetFeedbackInput,
    LinkFlagInput,
    LinkFlagOutput,
    LinkIdListOutput,
    LinkSummary,
    LinkSummaryListOutput,
    ListAllActiveLinksInput,
    ListByCreatorInput,
    ListBySubmitterInput,
    ListFeedbackIdsInput,
    ListFeedbacksInput,
    Submission,
    SubmissionListOutput,
)
from .ports import LedgerReadPort, QueryLedgerPort

__all__ = [
    # Entry points
    "run_list_feedback_ids",
    "run_get_feedback",
    "run_is_active",
    "run_is_private",
    "run_list_active_public_links",
    "run_list_all_active_links",
    "run_list_by_creator",
    "run_list_by_submitter",
    "run_list_feedbacks",
    # Projections
    "FeedbackView",
    "LinkSummary",
    "Submission",
    "FeedbackEntry",
    # Input models
    "ListFeedbackIdsInput",
    "GetFeedbackInput",
    "LinkFlagInput",
    "ListAllActiveLinksInput",
    "ListByCreatorInput",
    "ListBySubmitterInput",
    "ListFeedbacksInput",
    # Output models
    "LinkIdListOutput",
    "FeedbackIdListOutput",
    "FeedbackViewOutput",
    "LinkFlagOutput",
    "LinkSummaryListOutput",
    "SubmissionListOutput",
    "FeedbackEntryListOutput",
    # Ports
    "LedgerReadPort",
    "QueryLedgerPort",
    # Core
    "QueryEngine",
]
