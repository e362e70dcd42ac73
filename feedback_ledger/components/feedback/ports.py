"""
Feedback component - Port interfaces.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from feedback_ledger.domain.entities import Feedback, Link, Principal
from feedback_ledger.domain.notifications import FeedbackSubmitted, Notification


class FeedbackReadPort(Protocol):
    """Read access to the feedback arena."""

    def get_feedback(self, feedback_id: int) -> Feedback | None: ...


class FeedbackStatePort(FeedbackReadPort, Protocol):
    """Transactional access for submissions."""

    now: datetime

    @property
    def next_feedback_id(self) -> int: ...

    def is_admin(self, principal: Principal) -> bool: ...

    def get_link(self, link_id: str) -> Link | None: ...

    def put_link(self, link: Link) -> None: ...

    def append_feedback(self, link_id: str, feedback: Feedback) -> None: ...

    def emit(self, notification: Notification) -> None: ...


class FeedbackLedgerPort(Protocol):
    """Ledger operations used by the feedback shell."""

    def submit_feedback(
        self, caller: Principal, link_id: str, content: bytes
    ) -> FeedbackSubmitted: ...

    def get_feedback_record(self, feedback_id: int) -> Feedback: ...
