"""
Feedback component - Immutable feedback records.
"""

from ._impl import PRIVATE_LINK_MESSAGE, FeedbackReader, FeedbackStore
from .component import run_get_record, run_submit
from .models import (
    FeedbackOperationOutput,
    FeedbackRecordOutput,
    GetFeedbackRecordInput,
    SubmitFeedbackInput,
)
from .ports import FeedbackLedgerPort, FeedbackReadPort, FeedbackStatePort

__all__ = [
    # Entry points
    "run_submit",
    "run_get_record",
    # Input models
    "SubmitFeedbackInput",
    "GetFeedbackRecordInput",
    # Output models
    "FeedbackOperationOutput",
    "FeedbackRecordOutput",
    # Ports
    "FeedbackReadPort",
    "FeedbackStatePort",
    "FeedbackLedgerPort",
    # Core
    "FeedbackReader",
    "FeedbackStore",
    "PRIVATE_LINK_MESSAGE",
]
