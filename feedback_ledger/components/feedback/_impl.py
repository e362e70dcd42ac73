"""
FeedbackStore - immutable feedback records.

Functional Core - pure business logic over a transactional state port.

Records live in one arena indexed by a global sequential id. A record is
never altered or removed; deleting its link only hides it.
"""

from __future__ import annotations

from feedback_ledger.domain.entities import Feedback, Principal
from feedback_ledger.domain.errors import (
    EmptyContentError,
    FeedbackNotFoundError,
    LinkDeletedError,
    LinkInactiveError,
    LinkNotFoundError,
    UnauthorizedError,
)
from feedback_ledger.domain.notifications import FeedbackSubmitted
from feedback_ledger.domain.policy import VisibilityPolicy
from feedback_ledger.domain.state import append_feedback

from .ports import FeedbackReadPort, FeedbackStatePort

PRIVATE_LINK_MESSAGE = "Only admins can submit feedback to private links"


class FeedbackReader:
    """Raw record lookups, no redaction."""

    def __init__(self, state: FeedbackReadPort) -> None:
        self._state = state

    def get(self, feedback_id: int) -> Feedback:
        feedback = self._state.get_feedback(feedback_id)
        if feedback is None:
            raise FeedbackNotFoundError()
        return feedback


class FeedbackStore(FeedbackReader):
    def __init__(self, state: FeedbackStatePort, policy: VisibilityPolicy) -> None:
        super().__init__(state)
        self._tx = state
        self._policy = policy

    def submit_feedback(
        self, caller: Principal, link_id: str, content: bytes
    ) -> FeedbackSubmitted:
        link = self._tx.get_link(link_id)
        if link is None:
            raise LinkNotFoundError()
        if link.is_deleted:
            raise LinkDeletedError()
        if not link.is_active:
            raise LinkInactiveError()
        if not content:
            raise EmptyContentError()
        if not self._policy.can_submit(link, self._tx.is_admin(caller)):
            raise UnauthorizedError(PRIVATE_LINK_MESSAGE)

        feedback = Feedback(
            id=self._tx.next_feedback_id,
            author=caller,
            content=content,
            timestamp=self._tx.now,
        )
        self._tx.append_feedback(link.id, feedback)
        self._tx.put_link(append_feedback(link, feedback.id))

        event = FeedbackSubmitted(
            feedback_id=feedback.id,
            link_id=link.id,
            author=caller,
            timestamp=feedback.timestamp,
            is_active=link.is_active,
            is_private=link.is_private,
        )
        self._tx.emit(event)
        return event
